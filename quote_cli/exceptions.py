"""
Custom exception classes for the CLI interface.

Each exception carries the exit code the quote-checker process ends with, so
CI jobs can tell a quote that failed validation (1) apart from bad input (2),
bad configuration (5) and a PDF that could not be read (6).
"""

from typing import Optional


class CLIError(Exception):
    """Base exception for CLI-related errors."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class ValidationError(CLIError):
    """Raised when command input (fixture file, row, options) is unusable."""

    def __init__(self, message: str):
        super().__init__(f"Validation Error: {message}", exit_code=2)


class ConfigurationError(CLIError):
    """Raised when the mismatch mode or numeric tolerance is invalid."""

    def __init__(self, message: str):
        super().__init__(f"Configuration Error: {message}", exit_code=5)


class ProcessingError(CLIError):
    """Raised when a quote PDF cannot be read or its text extracted."""

    def __init__(self, message: str, pdf_path: Optional[str] = None):
        super().__init__(f"Processing Error: {message}", exit_code=6)
        self.pdf_path = pdf_path


class QuoteMismatchError(CLIError):
    """
    Raised when --on-mismatch throw stops at the first mismatching field.

    Shares exit code 1 with a collected failure: either way the quote did
    not match its fixture.
    """

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(f"Quote Mismatch: {message}", exit_code=1)
        self.field_name = field_name
