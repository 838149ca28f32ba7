"""
End-to-end validation of a downloaded quote PDF.

Combines text acquisition and the validation engine so callers can go from a
PDF path and a fixture record straight to a ValidationReport.
"""

import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from .models import ValidationConfiguration, ValidationReport
from .pdf_processor import PDFProcessor
from .validation_engine import QuoteValidationEngine


logger = logging.getLogger(__name__)


class QuotePDFValidator:
    """Validates quote PDFs on disk against fixture records."""

    def __init__(self, config: Optional[ValidationConfiguration] = None,
                 processor: Optional[PDFProcessor] = None,
                 engine: Optional[QuoteValidationEngine] = None):
        self.config = config or ValidationConfiguration()
        self.processor = processor or PDFProcessor()
        self.engine = engine or QuoteValidationEngine(self.config)

    def validate_quote(self, pdf_path: Union[str, Path], fixture: Mapping[str, object],
                       expected_pricing: Optional[str] = None,
                       sections: Optional[Iterable[str]] = None,
                       save_text_to: Optional[Union[str, Path]] = None) -> ValidationReport:
        """
        Extract the PDF text and validate it.

        Args:
            pdf_path: Path to the quote PDF
            fixture: Expected values for the quote
            expected_pricing: Optional expected price
            sections: Optional subset of sections to validate
            save_text_to: If given, the extracted text is written there for
                diagnosing extraction problems

        Raises:
            PDFReadabilityError, TextExtractionError: If the PDF cannot be read
            ValidationError: In fail-fast mode, on the first mismatch
        """
        logger.info(f"Starting PDF content validation for {pdf_path}")
        text = self.processor.extract_text(pdf_path)

        if save_text_to:
            save_extracted_text(text, save_text_to)

        report = self.engine.validate(text, fixture, expected_pricing=expected_pricing,
                                      sections=sections)
        if report.is_valid:
            logger.info("PDF content validation completed successfully")
        else:
            logger.warning(f"PDF content validation failed for "
                           f"{len(report.get_failed_outcomes())} field(s)")
        return report


def save_extracted_text(text: str, output_path: Union[str, Path]) -> Path:
    """Write extracted PDF text to a file, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    logger.info(f"PDF content saved to {path}")
    return path
