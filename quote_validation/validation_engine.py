"""
Validation Engine - field validation of quote PDF text against fixtures.

This module provides the QuoteValidationEngine class that validates the text
extracted from a quote PDF against an expected fixture record, section by
section, and assembles a ValidationReport.

Usage Examples:

    # Fail-soft validation (default): every field is checked and reported
    from quote_validation.validation_engine import QuoteValidationEngine

    engine = QuoteValidationEngine()
    report = engine.validate(pdf_text, fixture, expected_pricing="527.00")
    for line in report.results:
        print(line)

    # Fail-fast validation: raises ValidationError on the first mismatch
    config = ValidationConfiguration(on_mismatch="throw")
    engine = QuoteValidationEngine(config)
    engine.validate(pdf_text, fixture)
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from .equivalence import EquivalenceChecker
from .exceptions import ValidationError
from .field_extractor import FieldExtractor
from .fixtures import normalize_fixture
from .models import FieldOutcome, ValidationConfiguration, ValidationReport
from .sections import SECTION_NAMES, SectionValidator, default_sections


logger = logging.getLogger(__name__)


class ReportAssembler:
    """
    Builds a ValidationReport incrementally.

    Owned by a single validation run; the report it builds is immutable.
    """

    def __init__(self):
        self._outcomes: List[FieldOutcome] = []
        self._is_valid = True

    def add(self, outcome: FieldOutcome) -> None:
        self._outcomes.append(outcome)
        self._is_valid = self._is_valid and outcome.matched

    def extend(self, outcomes: Iterable[FieldOutcome]) -> None:
        for outcome in outcomes:
            self.add(outcome)

    def build(self, raw_text: str = "") -> ValidationReport:
        return ValidationReport(
            is_valid=self._is_valid,
            results=tuple(outcome.message for outcome in self._outcomes),
            raw_text=raw_text,
            outcomes=tuple(self._outcomes)
        )


class QuoteValidationEngine:
    """
    Core validation engine for quote PDF text.

    Extracts each expected field from the text, compares it with the fixture
    value and reports a per-field outcome. No I/O is performed; the caller
    supplies the extracted PDF text.
    """

    def __init__(self, config: Optional[ValidationConfiguration] = None,
                 extractor: Optional[FieldExtractor] = None,
                 checker: Optional[EquivalenceChecker] = None):
        """
        Initialize the validation engine.

        Args:
            config: Optional validation configuration
            extractor: Label extractor used when a section does not supply one
            checker: Equivalence checker; built from the configuration if omitted
        """
        self.config = config or ValidationConfiguration()
        self.extractor = extractor or FieldExtractor()
        self.checker = checker or EquivalenceChecker(self.config.numeric_tolerance)
        self.sections: Dict[str, SectionValidator] = default_sections()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def validate_field(self, field_name: str, expected_value: str, text: str,
                       source_label: str, extractor=None) -> FieldOutcome:
        """
        Validate a single field.

        Args:
            field_name: Display name used in messages
            expected_value: Expected value from the fixture
            text: Raw PDF text
            source_label: Label as it appears in the PDF text
            extractor: Optional extractor overriding the engine default

        Returns:
            FieldOutcome for the field

        Raises:
            ValidationError: In fail-fast mode, if a found value does not match
        """
        if extractor is None:
            extractor = self.extractor
        actual = extractor.extract(text or "", source_label)

        if actual is None:
            self.logger.warning(f"Field '{field_name}' not found in PDF content")
            return FieldOutcome(
                field_name=field_name,
                expected_value=expected_value,
                actual_value=None,
                matched=False,
                message=f"⚠ Field '{field_name}' not found"
            )

        if self.checker.matches(expected_value, actual):
            message = f"✓ {field_name}: Expected '{expected_value}' matches PDF value '{actual}'"
            self.logger.info(message)
            return FieldOutcome(field_name, expected_value, actual, True, message)

        message = f"✗ {field_name}: Expected '{expected_value}' but found '{actual}'"
        self.logger.info(message)
        outcome = FieldOutcome(field_name, expected_value, actual, False, message)
        if self.config.fail_fast:
            raise ValidationError(field_name, expected_value, actual, outcome=outcome)
        return outcome

    def validate(self, pdf_text: str, fixture: Mapping[str, object],
                 expected_pricing: Optional[str] = None,
                 sections: Optional[Iterable[str]] = None) -> ValidationReport:
        """
        Validate PDF text against a fixture record.

        Args:
            pdf_text: Full text extracted from the quote PDF
            fixture: Expected values; camelCase, snake_case and lowercase keys
                are all accepted
            expected_pricing: Expected quoted price; the pricing section runs
                only when a price is supplied here or in the fixture
            sections: Section names to run, defaults to all in PDF order

        Returns:
            ValidationReport with per-field results

        Raises:
            ValidationError: In fail-fast mode, on the first mismatch
            ValueError: If an unknown section name is requested
        """
        text = pdf_text or ""
        normalized = normalize_fixture(fixture)
        if expected_pricing is not None and str(expected_pricing).strip():
            normalized['pricing'] = str(expected_pricing).strip()

        section_names = list(sections) if sections is not None else list(SECTION_NAMES)
        unknown = [name for name in section_names if name not in self.sections]
        if unknown:
            raise ValueError(f"Unknown section(s): {', '.join(unknown)}. "
                             f"Valid sections: {', '.join(SECTION_NAMES)}")

        self.logger.debug(f"Starting quote validation ({len(text)} characters, "
                          f"sections: {', '.join(section_names)})")
        if not text.strip():
            self.logger.warning("PDF text is empty; every field will be reported as not found")

        assembler = ReportAssembler()
        for name in section_names:
            assembler.extend(self.sections[name].validate(self, text, normalized))

        report = assembler.build(text if self.config.include_raw_text else "")
        if not report.outcomes:
            self.logger.warning("Fixture supplied no values for the selected sections")

        summary = report.get_summary_statistics()
        self.logger.debug(f"Validation completed: {summary['matched_fields']} matched, "
                          f"{summary['mismatched_fields']} mismatched, "
                          f"{summary['not_found_fields']} not found")
        return report
