"""
PDF text acquisition for quote validation.

This module provides the PDFProcessor class that checks a downloaded quote
PDF is readable and extracts its full text with pdfplumber.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pdfplumber

from .exceptions import (
    QuoteValidationError,
    PDFReadabilityError,
    TextExtractionError
)


class PDFProcessor:
    """
    Extracts text from quote PDFs.

    Pages are joined with newlines so that label patterns that stop at a
    line break never run across a page boundary.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize PDFProcessor.

        Args:
            logger: Optional logger instance. If not provided, uses the module logger.
        """
        self.logger = logger or logging.getLogger(__name__)

    def extract_text(self, pdf_path: Union[str, Path]) -> str:
        """
        Extract text content from all pages of the PDF.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            Complete text content from all pages

        Raises:
            PDFReadabilityError: If the file is missing or cannot be opened
            TextExtractionError: If no text could be extracted
        """
        pdf_path = Path(pdf_path)
        self.logger.info(f"Extracting text from PDF: {pdf_path}")
        self._validate_pdf_path(pdf_path)

        try:
            page_texts = []
            with pdfplumber.open(pdf_path) as pdf:
                if len(pdf.pages) == 0:
                    raise PDFReadabilityError("PDF contains no pages", pdf_path=str(pdf_path))

                self.logger.debug(f"PDF opened successfully, found {len(pdf.pages)} pages")
                for page_num, page in enumerate(pdf.pages, 1):
                    page_text = page.extract_text()
                    if page_text:
                        page_texts.append(page_text)
                        self.logger.debug(f"Page {page_num}: extracted {len(page_text)} characters")
                    else:
                        self.logger.warning(f"Page {page_num}: no text extracted")

        except QuoteValidationError:
            raise
        except Exception as e:
            self.logger.error(f"Failed to read PDF {pdf_path}: {e}")
            raise PDFReadabilityError(
                f"Error accessing PDF: {e}",
                pdf_path=str(pdf_path),
                original_error=e
            ) from e

        full_text = "\n".join(page_texts)
        if not full_text.strip():
            raise TextExtractionError(
                "No text could be extracted from PDF",
                pdf_path=str(pdf_path)
            )

        self.logger.info(f"Extracted {len(full_text)} characters from {len(page_texts)} page(s)")
        return full_text

    def _validate_pdf_path(self, pdf_path: Path) -> None:
        if not pdf_path.exists():
            raise PDFReadabilityError(f"PDF file not found: {pdf_path}", pdf_path=str(pdf_path))
        if not pdf_path.is_file():
            raise PDFReadabilityError(f"Path is not a file: {pdf_path}", pdf_path=str(pdf_path))
        if pdf_path.stat().st_size == 0:
            raise PDFReadabilityError(f"PDF file is empty: {pdf_path}", pdf_path=str(pdf_path))
