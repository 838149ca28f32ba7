"""
Quote PDF Validation Module.

This module validates the text of a generated insurance quote PDF against the
fixture values that drove the quote workflow: label-based field extraction,
tolerant value comparison, per-section validation and report generation.
"""

from .models import (
    FieldDefinition,
    FieldSpec,
    FieldOutcome,
    ValidationReport,
    ValidationConfiguration,
    MismatchMode
)
from .exceptions import (
    QuoteValidationError,
    PDFReadabilityError,
    TextExtractionError,
    FixtureError,
    ValidationError
)
from .field_extractor import FieldExtractor, PricingExtractor
from .equivalence import EquivalenceChecker
from .fixtures import load_fixtures, load_fixture_row, normalize_fixture
from .validation_engine import QuoteValidationEngine, ReportAssembler
from .pdf_processor import PDFProcessor
from .integration import QuotePDFValidator
from .report_generator import SimpleReportGenerator

__all__ = [
    'FieldDefinition',
    'FieldSpec',
    'FieldOutcome',
    'ValidationReport',
    'ValidationConfiguration',
    'MismatchMode',
    'QuoteValidationError',
    'PDFReadabilityError',
    'TextExtractionError',
    'FixtureError',
    'ValidationError',
    'FieldExtractor',
    'PricingExtractor',
    'EquivalenceChecker',
    'load_fixtures',
    'load_fixture_row',
    'normalize_fixture',
    'QuoteValidationEngine',
    'ReportAssembler',
    'PDFProcessor',
    'QuotePDFValidator',
    'SimpleReportGenerator'
]
