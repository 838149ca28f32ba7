"""
Custom exceptions for quote PDF validation.

This module defines specific exception classes for the errors that can occur
while reading a quote PDF, loading fixtures and validating fields.
"""

from typing import Optional, Dict, Any


class QuoteValidationError(Exception):
    """Base exception for all quote validation errors."""

    def __init__(self, message: str, pdf_path: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.pdf_path = pdf_path
        self.details = details or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.pdf_path:
            base_msg = f"{base_msg} (PDF: {self.pdf_path})"
        return base_msg


class PDFReadabilityError(QuoteValidationError):
    """Raised when a PDF file cannot be read or accessed."""

    def __init__(self, message: str, pdf_path: Optional[str] = None,
                 original_error: Optional[Exception] = None):
        super().__init__(message, pdf_path)
        self.original_error = original_error
        if original_error:
            self.details['original_error'] = str(original_error)
            self.details['error_type'] = type(original_error).__name__


class TextExtractionError(QuoteValidationError):
    """Raised when text cannot be extracted from PDF."""

    def __init__(self, message: str, pdf_path: Optional[str] = None,
                 page_number: Optional[int] = None):
        super().__init__(message, pdf_path)
        self.page_number = page_number
        if page_number is not None:
            self.details['page_number'] = page_number


class FixtureError(QuoteValidationError):
    """Raised when a fixture file cannot be loaded or a row is missing."""

    def __init__(self, message: str, fixture_path: Optional[str] = None,
                 row_index: Optional[int] = None):
        super().__init__(message)
        self.fixture_path = fixture_path
        self.row_index = row_index
        if fixture_path:
            self.details['fixture_path'] = fixture_path
        if row_index is not None:
            self.details['row_index'] = row_index


class ValidationError(QuoteValidationError):
    """
    Raised in fail-fast mode when an extracted value does not match the
    expected fixture value.
    """

    def __init__(self, field_name: str, expected_value: str,
                 actual_value: Optional[str], outcome=None):
        super().__init__(
            f"PDF validation failed for field '{field_name}': "
            f"Expected '{expected_value}' but found '{actual_value}'"
        )
        self.field_name = field_name
        self.expected_value = expected_value
        self.actual_value = actual_value
        self.outcome = outcome

        self.details['field_name'] = field_name
        self.details['expected_value'] = expected_value
        self.details['actual_value'] = actual_value
