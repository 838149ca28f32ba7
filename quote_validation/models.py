"""
Data models for quote PDF validation.

This module contains the value objects passed between the extractor, the
equivalence checker, the section validators and the report assembler.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class MismatchMode(str, Enum):
    """How the engine reacts when an extracted value does not match."""
    COLLECT = "collect"
    THROW = "throw"


@dataclass
class ValidationConfiguration:
    """
    Configuration for a validation run.

    on_mismatch selects fail-soft aggregation (collect) or fail-fast (throw).
    numeric_tolerance, when set, lets numeric values match by decimal value
    within the tolerance in addition to the plain digit comparison.
    """
    on_mismatch: MismatchMode = MismatchMode.COLLECT
    include_raw_text: bool = True
    numeric_tolerance: Optional[Decimal] = None

    def __post_init__(self):
        self.on_mismatch = MismatchMode(self.on_mismatch)
        if self.numeric_tolerance is not None:
            self.numeric_tolerance = Decimal(str(self.numeric_tolerance))

    @property
    def fail_fast(self) -> bool:
        return self.on_mismatch is MismatchMode.THROW


@dataclass(frozen=True)
class FieldDefinition:
    """One row of a section table: display name, fixture key and PDF label."""
    name: str
    fixture_key: str
    pdf_label: str


@dataclass(frozen=True)
class FieldSpec:
    """A field to validate in one run, with its expected fixture value."""
    name: str
    source_label: str
    expected_value: str


@dataclass(frozen=True)
class FieldOutcome:
    """The verdict and message for one validated field."""
    field_name: str
    expected_value: str
    actual_value: Optional[str]
    matched: bool
    message: str

    @property
    def found(self) -> bool:
        return self.actual_value is not None

    @property
    def status(self) -> str:
        if self.matched:
            return "MATCH"
        return "MISMATCH" if self.found else "NOT FOUND"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'field_name': self.field_name,
            'expected_value': self.expected_value,
            'actual_value': self.actual_value,
            'matched': self.matched,
            'status': self.status,
            'message': self.message,
        }


@dataclass(frozen=True)
class ValidationReport:
    """
    Result of validating one PDF text against one fixture.

    is_valid is the AND of every outcome's matched flag; results holds the
    outcome messages in section and field-table order.
    """
    is_valid: bool
    results: Tuple[str, ...] = ()
    raw_text: str = ""
    outcomes: Tuple[FieldOutcome, ...] = ()

    def get_failed_outcomes(self) -> List[FieldOutcome]:
        """Return outcomes that did not match, in report order."""
        return [outcome for outcome in self.outcomes if not outcome.matched]

    def get_summary_statistics(self) -> Dict[str, Any]:
        """Provide simple summary statistics consumed by reporting."""
        total = len(self.outcomes)
        matched = sum(1 for outcome in self.outcomes if outcome.matched)
        not_found = sum(1 for outcome in self.outcomes if not outcome.found)
        return {
            'total_fields': total,
            'matched_fields': matched,
            'mismatched_fields': total - matched - not_found,
            'not_found_fields': not_found,
            'match_rate': round(matched / total * 100) if total else 100,
            'is_valid': self.is_valid,
        }

    def to_dict(self, include_raw_text: bool = True) -> Dict[str, Any]:
        data = {
            'is_valid': self.is_valid,
            'results': list(self.results),
            'fields': [outcome.to_dict() for outcome in self.outcomes],
            'summary': self.get_summary_statistics(),
        }
        if include_raw_text:
            data['raw_text'] = self.raw_text
        return data
