"""
Centralized error handling utilities for CLI commands.

Library errors are reported with recovery suggestions and re-raised as
CLIError subclasses carrying the command's exit code.
"""

import logging
from functools import wraps
from typing import Any, Callable, Dict, Optional

from quote_cli.exceptions import (
    CLIError,
    ProcessingError,
    QuoteMismatchError,
    ValidationError as CLIValidationError
)
from quote_cli.formatters import print_error, print_info
from quote_validation.exceptions import (
    FixtureError,
    PDFReadabilityError,
    QuoteValidationError,
    TextExtractionError,
    ValidationError
)

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error handling with recovery suggestions."""

    @staticmethod
    def handle_pdf_error(error: QuoteValidationError, context: Dict[str, Any]) -> None:
        """
        Handle errors raised while reading a quote PDF.

        Args:
            error: The PDF readability or text extraction error
            context: Additional context about the operation that failed
        """
        pdf_path = error.pdf_path or context.get('file_path', 'unknown')
        print_error(f"Could not read quote PDF: {pdf_path}")
        print_info("Recovery suggestions:")
        if isinstance(error, TextExtractionError):
            print_info("  1. The PDF may be a scanned image without a text layer")
            print_info("  2. Re-download the quote and check it opens in a PDF viewer")
            print_info("  3. Validate previously extracted text instead:")
            print_info("     quote-checker validate <text-file> --text --fixtures <csv>")
        else:
            print_info("  1. Check that the file path is correct")
            print_info("  2. Make sure the download finished before validating")
            print_info("  3. Verify the file is a PDF and is not password protected")

    @staticmethod
    def handle_fixture_error(error: FixtureError, context: Dict[str, Any]) -> None:
        print_error(f"Fixture error: {error}")
        print_info("Recovery suggestions:")
        print_info("  1. List the rows of the fixture file:")
        print_info("     quote-checker fixtures <csv>")
        print_info("  2. Check that the file has a header row and at least one data row")
        if error.row_index is not None:
            print_info("  3. Row indexes start at 0 and exclude the header")

    @staticmethod
    def handle_mismatch_error(error: ValidationError, context: Dict[str, Any]) -> None:
        print_error(str(error))
        print_info("Validation stopped at the first mismatch (--on-mismatch throw).")
        print_info("Run with --on-mismatch collect to see every field.")

    @staticmethod
    def with_error_handling(error_context: Optional[Dict[str, Any]] = None):
        """
        Decorator for consistent error handling across commands.

        Args:
            error_context: Additional context to include in error handling

        Returns:
            Decorator function that wraps command functions with error handling
        """
        if error_context is None:
            error_context = {}

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                try:
                    return func(*args, **kwargs)

                except CLIError:
                    raise

                # Most specific first: ValidationError and FixtureError are
                # QuoteValidationError subclasses too
                except ValidationError as e:
                    logger.debug(f"Field mismatch in {func.__name__}: {e}")
                    ErrorHandler.handle_mismatch_error(e, error_context)
                    raise QuoteMismatchError(str(e), field_name=e.field_name)

                except FixtureError as e:
                    logger.warning(f"Fixture error in {func.__name__}: {e}")
                    ErrorHandler.handle_fixture_error(e, error_context)
                    raise CLIValidationError(str(e))

                except (PDFReadabilityError, TextExtractionError) as e:
                    logger.error(f"PDF error in {func.__name__}: {e}")
                    ErrorHandler.handle_pdf_error(e, error_context)
                    raise ProcessingError(str(e), pdf_path=e.pdf_path)

                except QuoteValidationError as e:
                    logger.exception(f"Validation error in {func.__name__}")
                    print_error(str(e))
                    raise ProcessingError(str(e), pdf_path=e.pdf_path)

            return wrapper
        return decorator


def error_handler(error_context: Optional[Dict[str, Any]] = None):
    """Alias for ErrorHandler.with_error_handling."""
    return ErrorHandler.with_error_handling(error_context)
