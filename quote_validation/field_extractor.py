"""
Field extraction from unstructured quote PDF text.

PDF-to-text conversion places whitespace and line breaks inconsistently, so a
label's value is searched with an ordered list of overlapping patterns and
the first one that yields a non-empty value wins. The redundancy trades
precision for recall: a label that appears more than once, or that occurs
inside another field's captured run (e.g. "City" inside a street line), can
produce a false positive.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence


logger = logging.getLogger(__name__)


# Every label the generated quote PDF is known to contain.
DEBUG_LABELS = [
    'First Name', 'Last Name', 'Birthdate', 'Gender',
    'Country', 'ZIP', 'City', 'Street Address', 'Occupation',
    'Make', 'Model', 'Engine Performance', 'Cylinder Capacity',
    'Date of Manufacture', 'Number of Seats', 'Fuel Type',
    'List Price', 'Annual Mileage',
    'Start Date', 'Insurance Sum', 'Merit Rating', 'Legal Defence Insurance',
    'Damage Insurance', 'Courtesy Car', 'Euro Protection', 'Price Option',
    'PRICING'
]


@dataclass(frozen=True)
class ExtractionStrategy:
    """
    A single label-anchored pattern.

    ``value_pattern`` is appended to the escaped label. The matched span has
    the label and its separator removed before it is returned.
    """
    name: str
    value_pattern: str

    def compile(self, label: str) -> 're.Pattern[str]':
        return re.compile(re.escape(label) + self.value_pattern, re.IGNORECASE)

    def apply(self, text: str, label: str) -> Optional[str]:
        match = self.compile(label).search(text)
        if not match:
            return None

        label_prefix = re.compile(re.escape(label) + r'[:\s]*', re.IGNORECASE)
        value = label_prefix.sub('', match.group(0)).strip()
        return value or None


LABEL_STRATEGIES = (
    ExtractionStrategy('separator_to_line_end', r'[:\s]+([^\n\r]+)'),
    ExtractionStrategy('restricted_charset', r'[:\s]*([A-Za-z0-9\s/\-.]+)'),
    ExtractionStrategy('colon_to_line_end', r'\s*:\s*([^\n\r]+)'),
    ExtractionStrategy('whitespace_to_line_end', r'\s+([^\n\r]+)'),
)


def first_success(strategies: Iterable[ExtractionStrategy], text: str,
                  label: str) -> Optional[str]:
    """Evaluate strategies in order and return the first non-empty value."""
    for strategy in strategies:
        value = strategy.apply(text, label)
        if value is not None:
            logger.debug(f"'{label}' extracted by {strategy.name}: {value!r}")
            return value
    return None


class FieldExtractor:
    """Extracts the value that follows a label in PDF text."""

    def __init__(self, strategies: Sequence[ExtractionStrategy] = LABEL_STRATEGIES):
        self.strategies = tuple(strategies)

    def extract(self, text: str, label: str) -> Optional[str]:
        """
        Return the best-guess value following ``label``, or None.

        Args:
            text: Raw text extracted from the PDF
            label: Label as it appears in the PDF text

        Returns:
            Extracted value or None if no strategy produced a value
        """
        if not text or not label:
            return None
        return first_success(self.strategies, text, label)

    def extract_fields(self, text: str, labels: Iterable[str] = DEBUG_LABELS) -> Dict[str, Optional[str]]:
        """Extract every label in order, for inspecting what a PDF contains."""
        return {label: self.extract(text, label) for label in labels}


class PricingExtractor:
    """
    Extracts the quoted price.

    The price has no stable preceding label in the PDF text, so it is located
    by currency patterns instead. The label argument is accepted for
    interface compatibility with FieldExtractor and ignored.
    """

    AMOUNT = r'(\d+[,.]?\d*[.,]?\d*)'

    PRICING_PATTERNS = [
        re.compile(AMOUNT + r'\s*\$?\s*p\.a\.', re.IGNORECASE),
        re.compile(r'PRICING[:\s]*' + AMOUNT + r'\s*\$', re.IGNORECASE),
        re.compile(r'(\d+[,.]?\d*)\s*\$\s*per\s*annum', re.IGNORECASE),
        re.compile(r'Total[:\s]*' + AMOUNT + r'\s*\$', re.IGNORECASE),
    ]

    def __init__(self, patterns: Optional[List['re.Pattern[str]']] = None):
        self.patterns = list(patterns) if patterns is not None else list(self.PRICING_PATTERNS)

    def extract(self, text: str, label: Optional[str] = None) -> Optional[str]:
        if not text:
            return None
        for pattern in self.patterns:
            match = pattern.search(text)
            if match:
                amount = match.group(1).strip()
                if amount:
                    logger.debug(f"Pricing extracted by {pattern.pattern!r}: {amount}")
                    return amount
        return None
