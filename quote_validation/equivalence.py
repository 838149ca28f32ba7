"""
Tolerant comparison of expected fixture values against extracted PDF values.

The date and numeric rules are string normalizations, not semantic parsing:
"12/03/1980" equals "12-03-1980" but not "03/12/1980", and "1,200.00" equals
"1200.00" but not "1200".
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, List, Optional, Tuple


logger = logging.getLogger(__name__)

DATE_SEPARATORS = re.compile(r'[\-/.]')
NON_NUMERIC = re.compile(r'[^0-9.]')
DIGIT = re.compile(r'\d')
NUMERIC_LIKE = re.compile(r'^[\d\s.,\-/$€£]+$')
CURRENCY = re.compile(r'[\s$€£]')
AMOUNT = re.compile(r'^(\d{1,3}(,\d{3})+|\d+)(\.\d+)?$')
AMOUNT_MARKER = re.compile(r'[.,$€£]')


def normalize(value: str) -> str:
    return str(value).strip().lower()


def exact_match(expected: str, actual: str) -> bool:
    return normalize(expected) == normalize(actual)


def is_numeric_like(value: str) -> bool:
    return bool(NUMERIC_LIKE.match(value)) and bool(DIGIT.search(value))


def substring_match(expected: str, actual: str) -> bool:
    """
    Containment in either direction. Purely numeric values (amounts, dates,
    ZIP codes) never match by containment: "1200" is not "1200.00".
    """
    expected_normalized = normalize(expected)
    actual_normalized = normalize(actual)
    if is_numeric_like(expected_normalized) and is_numeric_like(actual_normalized):
        return False
    return expected_normalized in actual_normalized or actual_normalized in expected_normalized


def date_match(expected: str, actual: str) -> bool:
    """Compare with '-', '/' and '.' removed. Component order must agree."""
    expected_date = DATE_SEPARATORS.sub('', normalize(expected))
    actual_date = DATE_SEPARATORS.sub('', normalize(actual))
    if not DIGIT.search(expected_date):
        return False
    return expected_date == actual_date


def numeric_match(expected: str, actual: str) -> bool:
    """Compare the digit-and-dot sequences of both values as strings."""
    expected_number = NON_NUMERIC.sub('', str(expected))
    actual_number = NON_NUMERIC.sub('', str(actual))
    if not DIGIT.search(expected_number):
        return False
    return expected_number == actual_number


def parse_amount(value: str) -> Optional[Decimal]:
    """
    Decimal value of a plain amount such as "1,200.00 $", or None.

    Dates, ranges and European-style grouping ("1.200,00") are not amounts.
    """
    stripped = CURRENCY.sub('', str(value))
    if not AMOUNT.match(stripped):
        return None
    try:
        return Decimal(stripped.replace(',', ''))
    except InvalidOperation:
        return None


EquivalenceRule = Tuple[str, Callable[[str, str], bool]]

DEFAULT_RULES: List[EquivalenceRule] = [
    ('exact', exact_match),
    ('substring', substring_match),
    ('date', date_match),
    ('numeric', numeric_match),
]


class EquivalenceChecker:
    """
    Decides whether an extracted value matches the expected value.

    Rules are evaluated in order and the first that returns True wins. When a
    numeric tolerance is configured, plain amounts also match if they differ by
    no more than the tolerance. At least one side must carry a decimal point,
    grouping comma or currency symbol, so dates and ZIP codes never match by
    value.
    """

    def __init__(self, numeric_tolerance: Optional[Decimal] = None,
                 rules: Optional[List[EquivalenceRule]] = None):
        self.numeric_tolerance = numeric_tolerance
        self.rules = list(rules) if rules is not None else list(DEFAULT_RULES)
        if numeric_tolerance is not None:
            self.rules.append(('numeric_tolerance', self._within_tolerance))

    def matches(self, expected: str, actual: Optional[str]) -> bool:
        if actual is None:
            return False
        for name, rule in self.rules:
            if rule(expected, actual):
                logger.debug(f"'{expected}' ~ '{actual}' by {name} rule")
                return True
        return False

    def _within_tolerance(self, expected: str, actual: str) -> bool:
        # Bare integers on both sides are identifiers (ZIP codes, seat counts)
        if not (AMOUNT_MARKER.search(str(expected)) or AMOUNT_MARKER.search(str(actual))):
            return False
        expected_value = parse_amount(expected)
        actual_value = parse_amount(actual)
        if expected_value is None or actual_value is None:
            return False
        return abs(expected_value - actual_value) <= self.numeric_tolerance
