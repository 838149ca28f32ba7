"""
Field extraction debug command.

Shows what the label extractor finds in a quote PDF for every known label,
which is the quickest way to see why a field fails validation.
"""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from quote_cli.context import pass_context
from quote_cli.error_handlers import error_handler
from quote_cli.formatters import format_json
from quote_validation.field_extractor import DEBUG_LABELS, FieldExtractor, PricingExtractor
from quote_validation.pdf_processor import PDFProcessor


logger = logging.getLogger(__name__)


@click.command(name='extract')
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--label', '-l', 'labels', multiple=True,
              help='Label to extract (repeatable, default: every known quote label)')
@click.option('--text', 'from_text', is_flag=True,
              help='INPUT_PATH is a text file of already extracted PDF text')
@click.option('--raw', is_flag=True, help='Also print the raw extracted text')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table',
              show_default=True, help='Output format')
@pass_context
@error_handler({'operation': 'extract', 'command': 'extract'})
def extract(ctx, input_path, labels, from_text, raw, output_format):
    """
    Show the value extracted for each label of a quote PDF.

    Examples:
        quote-checker extract quote.pdf

        quote-checker extract quote.pdf -l "First Name" -l "ZIP"
    """
    if from_text:
        text = Path(input_path).read_text(encoding='utf-8')
    else:
        text = PDFProcessor().extract_text(input_path)

    values = FieldExtractor().extract_fields(text, list(labels) or DEBUG_LABELS)
    if not labels:
        values['Pricing (amount)'] = PricingExtractor().extract(text)

    if output_format == 'json':
        click.echo(format_json(values))
    else:
        console = Console()
        if raw:
            console.rule("RAW PDF CONTENT")
            console.print(text, markup=False, highlight=False)
            console.rule()

        table = Table(title="Extracted Fields")
        table.add_column("Label", style="cyan")
        table.add_column("Value")
        for label, value in values.items():
            table.add_row(label, Text(value) if value is not None else Text("NOT FOUND", style="red"))
        console.print(table)

    found = sum(1 for value in values.values() if value is not None)
    logger.info(f"Extracted {found}/{len(values)} labels from {input_path}")
