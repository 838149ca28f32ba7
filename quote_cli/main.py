"""
Main CLI entry point for the quote checker.

This module provides the main command-line interface with its command group
and global options.
"""

import logging
import sys

import click

from quote_cli.context import CLIContext, pass_context
from quote_cli.version import get_version, get_version_info
from quote_cli.commands import (
    validate_commands,
    extract_commands,
    fixture_commands
)
from quote_cli.exceptions import CLIError
from quote_cli.formatters import display_summary, format_json, setup_logging


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-essential output')
@click.version_option(version=get_version(), prog_name="quote-checker")
@click.pass_context
def cli(ctx, verbose, quiet):
    """
    Quote PDF Validator - CLI Tool

    Validates the PDF generated by the insurance quote workflow against the
    fixture data that was entered into the quote form.

    Examples:
        # Validate a downloaded quote against the first fixture row
        quote-checker validate quote.pdf --fixtures testdata.csv

        # See what each label extracts to
        quote-checker extract quote.pdf

        # List fixture rows
        quote-checker fixtures testdata.csv
    """
    cli_ctx = CLIContext()
    cli_ctx.verbose = verbose
    cli_ctx.quiet = quiet
    ctx.obj = cli_ctx

    setup_logging(verbose, quiet)


cli.add_command(validate_commands.validate)
cli.add_command(extract_commands.extract)
cli.add_command(fixture_commands.fixtures)


@cli.command()
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@pass_context
def version(ctx, output_format):
    """Show version information."""
    info = get_version_info()
    if output_format == 'json':
        click.echo(format_json(info))
    else:
        display_summary("Quote PDF Validator", info)


def main():
    """Main entry point for the CLI application."""
    try:
        cli(standalone_mode=True)
    except CLIError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(130)
    except Exception as e:
        logger = logging.getLogger(__name__)
        logger.exception("Unexpected error occurred")
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
