"""
Unit tests for PDF text acquisition and end-to-end quote validation.
"""

from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

from quote_validation.exceptions import PDFReadabilityError, TextExtractionError
from quote_validation.integration import QuotePDFValidator, save_extracted_text
from quote_validation.models import ValidationConfiguration
from quote_validation.pdf_processor import PDFProcessor


def _mock_pdf(*page_texts):
    """Build a pdfplumber.open() return value with the given page texts."""
    pages = []
    for text in page_texts:
        page = Mock()
        page.extract_text.return_value = text
        pages.append(page)

    pdf = MagicMock()
    pdf.pages = pages
    pdf.__enter__.return_value = pdf
    return pdf


class TestPDFProcessor:
    """Test cases for PDFProcessor class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.processor = PDFProcessor()

    @pytest.fixture
    def pdf_path(self, tmp_path):
        path = tmp_path / "quote.pdf"
        path.write_bytes(b"%PDF-1.4 quote")
        return path

    def test_processor_initialization(self):
        processor = PDFProcessor()
        assert processor.logger is not None

    @patch('quote_validation.pdf_processor.pdfplumber.open')
    def test_extract_text_joins_pages(self, mock_open, pdf_path):
        mock_open.return_value = _mock_pdf("First Name: John", "PRICING: 527.00 $")

        text = self.processor.extract_text(pdf_path)

        assert text == "First Name: John\nPRICING: 527.00 $"
        mock_open.assert_called_once_with(Path(pdf_path))

    @patch('quote_validation.pdf_processor.pdfplumber.open')
    def test_extract_text_skips_empty_pages(self, mock_open, pdf_path):
        mock_open.return_value = _mock_pdf(None, "City: Berlin", "")
        assert self.processor.extract_text(str(pdf_path)) == "City: Berlin"

    @patch('quote_validation.pdf_processor.pdfplumber.open')
    def test_extract_text_no_text(self, mock_open, pdf_path):
        mock_open.return_value = _mock_pdf(None, "  ")

        with pytest.raises(TextExtractionError) as exc_info:
            self.processor.extract_text(pdf_path)

        assert "No text could be extracted from PDF" in str(exc_info.value)
        assert exc_info.value.pdf_path == str(pdf_path)

    @patch('quote_validation.pdf_processor.pdfplumber.open')
    def test_extract_text_no_pages(self, mock_open, pdf_path):
        mock_open.return_value = _mock_pdf()

        with pytest.raises(PDFReadabilityError) as exc_info:
            self.processor.extract_text(pdf_path)

        assert "PDF contains no pages" in str(exc_info.value)

    @patch('quote_validation.pdf_processor.pdfplumber.open')
    def test_extract_text_open_failure(self, mock_open, pdf_path):
        mock_open.side_effect = ValueError("not a PDF")

        with pytest.raises(PDFReadabilityError) as exc_info:
            self.processor.extract_text(pdf_path)

        error = exc_info.value
        assert "Error accessing PDF" in str(error)
        assert isinstance(error.original_error, ValueError)
        assert error.details['error_type'] == 'ValueError'

    def test_extract_text_file_not_found(self, tmp_path):
        with pytest.raises(PDFReadabilityError) as exc_info:
            self.processor.extract_text(tmp_path / "missing.pdf")
        assert "PDF file not found" in str(exc_info.value)

    def test_extract_text_directory(self, tmp_path):
        with pytest.raises(PDFReadabilityError) as exc_info:
            self.processor.extract_text(tmp_path)
        assert "Path is not a file" in str(exc_info.value)

    def test_extract_text_empty_file(self, tmp_path):
        path = tmp_path / "empty.pdf"
        path.write_bytes(b"")
        with pytest.raises(PDFReadabilityError) as exc_info:
            self.processor.extract_text(path)
        assert "PDF file is empty" in str(exc_info.value)


class TestQuotePDFValidator:
    """Test cases for QuotePDFValidator class."""

    QUOTE_TEXT = "First Name: John\nCity: Berlin\nPRICING: 527.00 $"

    def setup_method(self):
        self.processor = Mock()
        self.processor.extract_text.return_value = self.QUOTE_TEXT
        self.validator = QuotePDFValidator(processor=self.processor)

    def test_validate_quote(self):
        report = self.validator.validate_quote("quote.pdf", {'firstName': 'John', 'city': 'Berlin'},
                                               expected_pricing="527.00")

        self.processor.extract_text.assert_called_once_with("quote.pdf")
        assert report.is_valid
        assert len(report.results) == 3
        assert report.raw_text == self.QUOTE_TEXT

    def test_validate_quote_failure(self):
        report = self.validator.validate_quote("quote.pdf", {'city': 'Munich'})
        assert not report.is_valid

    def test_validate_quote_uses_configuration(self):
        validator = QuotePDFValidator(ValidationConfiguration(include_raw_text=False),
                                      processor=self.processor)
        report = validator.validate_quote("quote.pdf", {'firstName': 'John'})
        assert report.raw_text == ""

    def test_validate_quote_saves_text(self, tmp_path):
        output = tmp_path / "debug" / "quote.txt"
        self.validator.validate_quote("quote.pdf", {'firstName': 'John'}, save_text_to=output)
        assert output.read_text(encoding='utf-8') == self.QUOTE_TEXT

    def test_processing_errors_propagate(self):
        self.processor.extract_text.side_effect = PDFReadabilityError("PDF file not found: x.pdf")
        with pytest.raises(PDFReadabilityError):
            self.validator.validate_quote("x.pdf", {'firstName': 'John'})

    def test_save_extracted_text(self, tmp_path):
        path = save_extracted_text("Make: Audi", tmp_path / "nested" / "out.txt")
        assert path.read_text(encoding='utf-8') == "Make: Audi"
