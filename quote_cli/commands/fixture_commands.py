"""
Fixture inspection command for the CLI interface.
"""

import click

from quote_cli.context import pass_context
from quote_cli.error_handlers import error_handler
from quote_cli.exceptions import ValidationError as CLIValidationError
from quote_cli.formatters import format_json, format_table, print_info
from quote_validation.fixtures import canonical_key, load_fixtures


# Columns shown by default, when the fixture file has them
SUMMARY_COLUMNS = [
    'firstname', 'lastname', 'dateofbirth', 'country', 'city',
    'make', 'fuel', 'insurancesum'
]


@click.command(name='fixtures')
@click.argument('fixtures_path', type=click.Path(dir_okay=False), required=False)
@click.option('--column', '-c', 'columns', multiple=True,
              help='Column to show (repeatable)')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table',
              show_default=True, help='Output format')
@pass_context
@error_handler({'operation': 'list_fixtures', 'command': 'fixtures'})
def fixtures(ctx, fixtures_path, columns, output_format):
    """
    List the rows of a fixture CSV file with their row indexes.

    Examples:
        quote-checker fixtures testdata.csv

        quote-checker fixtures testdata.csv -c firstname -c make
    """
    fixtures_path = fixtures_path or ctx.fixtures_path
    if not fixtures_path:
        raise CLIValidationError(
            "No fixture file given. Pass a path or set QUOTE_CHECKER_FIXTURES."
        )

    records = load_fixtures(fixtures_path)

    if output_format == 'json':
        click.echo(format_json(records))
        return

    headers = list(records[0].keys())
    by_canonical = {canonical_key(header): header for header in headers}
    if columns:
        selected = [by_canonical.get(canonical_key(column), column) for column in columns]
    else:
        selected = [by_canonical[key] for key in SUMMARY_COLUMNS if key in by_canonical]
        selected = selected or headers[:8]

    rows = [
        {'Row': index, **{column: record.get(column, '') for column in selected}}
        for index, record in enumerate(records)
    ]
    click.echo(format_table(rows, headers=['Row'] + selected))
    print_info(f"{len(records)} fixture row(s) in {fixtures_path}")
