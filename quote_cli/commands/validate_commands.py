"""
Quote validation commands for the CLI interface.

This module implements the validate command: it validates a quote PDF (or
previously extracted PDF text) against one row of a fixture CSV file and
optionally writes TXT / JSON / CSV reports.
"""

import logging
import sys
from pathlib import Path

import click

from quote_cli.context import pass_context
from quote_cli.error_handlers import error_handler
from quote_cli.exceptions import ValidationError as CLIValidationError
from quote_cli.formatters import (
    format_outcome, format_table, print_error, print_info, print_success, print_warning
)
from quote_validation.fixtures import load_fixture_row
from quote_validation.integration import QuotePDFValidator, save_extracted_text
from quote_validation.report_generator import REPORT_FORMATS, SimpleReportGenerator, get_summary_line
from quote_validation.sections import SECTION_NAMES
from quote_validation.validation_engine import QuoteValidationEngine


logger = logging.getLogger(__name__)


@click.command(name='validate')
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--fixtures', '-f', 'fixtures_path', type=click.Path(dir_okay=False),
              help='Fixture CSV file (default: $QUOTE_CHECKER_FIXTURES)')
@click.option('--row', '-r', type=int, default=0, show_default=True,
              help='Fixture row to validate against (0-based, header excluded)')
@click.option('--pricing', '-p', type=str, default=None,
              help='Expected quoted price; enables the Pricing section')
@click.option('--section', '-s', 'sections', type=click.Choice(SECTION_NAMES), multiple=True,
              help='Validate only these sections (repeatable)')
@click.option('--on-mismatch', type=click.Choice(['collect', 'throw']), default=None,
              help='Collect every mismatch or stop at the first one '
                   '(default: $QUOTE_CHECKER_ON_MISMATCH or collect)')
@click.option('--numeric-tolerance', type=str, default=None,
              help='Also match numbers whose values differ by at most this amount')
@click.option('--text', 'from_text', is_flag=True,
              help='INPUT_PATH is a text file of already extracted PDF text')
@click.option('--save-text', type=click.Path(dir_okay=False), default=None,
              help='Save the extracted PDF text to this file')
@click.option('--output-dir', '-o', type=click.Path(file_okay=False), default=None,
              help='Write reports to this directory (default: $QUOTE_CHECKER_OUTPUT_DIR)')
@click.option('--format', 'report_formats', type=click.Choice(REPORT_FORMATS), multiple=True,
              help='Report format(s) to write (default: txt)')
@click.option('--table', is_flag=True, help='Show an expected-vs-actual comparison table')
@click.option('--no-raw-text', is_flag=True, help='Leave the PDF text out of JSON reports')
@pass_context
@error_handler({'operation': 'validate', 'command': 'validate'})
def validate(ctx, input_path, fixtures_path, row, pricing, sections, on_mismatch,
             numeric_tolerance, from_text, save_text, output_dir, report_formats,
             table, no_raw_text):
    """
    Validate a quote PDF against a fixture row.

    Exits with status 0 when every field matches and 1 otherwise.

    Examples:
        quote-checker validate quote.pdf --fixtures testdata.csv

        quote-checker validate quote.pdf -f testdata.csv --pricing 527.00 --table

        quote-checker validate extracted.txt --text -f testdata.csv -s insurant
    """
    fixtures_path = fixtures_path or ctx.fixtures_path
    if not fixtures_path:
        raise CLIValidationError(
            "No fixture file given. Use --fixtures or set QUOTE_CHECKER_FIXTURES."
        )

    fixture = load_fixture_row(fixtures_path, row)
    config = ctx.get_configuration(on_mismatch=on_mismatch,
                                   include_raw_text=not no_raw_text,
                                   numeric_tolerance=numeric_tolerance)
    selected = list(sections) or None

    if from_text:
        text = Path(input_path).read_text(encoding='utf-8')
        if save_text:
            save_extracted_text(text, save_text)
        report = QuoteValidationEngine(config).validate(
            text, fixture, expected_pricing=pricing, sections=selected
        )
    else:
        report = QuotePDFValidator(config).validate_quote(
            input_path, fixture, expected_pricing=pricing, sections=selected,
            save_text_to=save_text
        )

    if save_text:
        print_info(f"PDF content saved to {save_text}")

    logger.debug(f"Validated {input_path} against row {row} of {fixtures_path}")
    for outcome in report.outcomes:
        click.echo(format_outcome(outcome))

    generator = SimpleReportGenerator()
    if table:
        click.echo(format_table(generator.get_comparison_rows(report),
                                headers=['Field', 'Expected', 'Actual', 'Status']))
    click.echo(get_summary_line(report))

    output_dir = output_dir or ctx.output_dir
    if output_dir:
        written = generator.write_reports(
            report, output_dir,
            formats=report_formats or ('txt',),
            base_name=f"{Path(input_path).stem}_validation",
            source=str(input_path)
        )
        for report_format, path in written.items():
            print_info(f"{report_format.upper()} report: {path}")

    if not report.outcomes:
        print_warning("Fixture row supplied no values for the selected sections")

    if report.is_valid:
        print_success("PDF content validation passed")
        return

    failed = report.get_failed_outcomes()
    print_error(f"PDF content validation failed for {len(failed)} field(s)")
    sys.exit(1)
