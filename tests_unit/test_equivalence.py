"""
Unit tests for expected-vs-actual value comparison.
"""

from decimal import Decimal

import pytest

from quote_validation.equivalence import (
    EquivalenceChecker,
    date_match,
    exact_match,
    is_numeric_like,
    numeric_match,
    parse_amount,
    substring_match
)


class TestEquivalenceRules:
    """Test the individual comparison rules."""

    def test_exact_match_ignores_case_and_padding(self):
        assert exact_match("Berlin", "  berlin ")
        assert not exact_match("Berlin", "Munich")

    def test_substring_match_either_direction(self):
        assert substring_match("Main St", "123 Main St")
        assert substring_match("123 Main Street", "Main Street")

    def test_substring_match_skips_numbers(self):
        assert not substring_match("1200", "1200.00")
        assert not substring_match("12345", "123456")

    def test_date_match_ignores_separators(self):
        assert date_match("12/03/1980", "12-03-1980")
        assert date_match("12.03.1980", "12/03/1980")

    def test_date_match_requires_same_component_order(self):
        assert not date_match("12/03/1980", "03/12/1980")

    def test_date_match_requires_digits(self):
        assert not date_match("Diesel", "Petrol")

    def test_numeric_match_ignores_grouping(self):
        assert numeric_match("1,200.00", "1200.00")
        assert numeric_match("$1200", "1200 €")

    def test_numeric_match_is_not_value_equality(self):
        assert not numeric_match("1200.00", "1200")

    def test_numeric_match_requires_digits(self):
        assert not numeric_match("abc", "xyz")

    @pytest.mark.parametrize("value,expected", [
        ("1,200.00", True),
        ("12/03/1980", True),
        ("$ 527", True),
        ("Berlin", False),
        ("A4", False),
        ("--", False),
    ])
    def test_is_numeric_like(self, value, expected):
        assert is_numeric_like(value) is expected


class TestEquivalenceChecker:
    """Test cases for EquivalenceChecker class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.checker = EquivalenceChecker()

    @pytest.mark.parametrize("expected,actual", [
        ("John", "John"),
        ("germany", "Germany"),
        ("Main St", "123 Main St"),
        ("12/03/1980", "12-03-1980"),
        ("1,200.00", "1200.00"),
        ("12345", "12345"),
    ])
    def test_matches(self, expected, actual):
        assert self.checker.matches(expected, actual)

    @pytest.mark.parametrize("expected,actual", [
        ("12/03/1980", "03/12/1980"),
        ("1200.00", "1200"),
        ("12345", "123456"),
        ("Berlin", "Munich"),
        ("Diesel", "Petrol"),
    ])
    def test_does_not_match(self, expected, actual):
        assert not self.checker.matches(expected, actual)

    def test_none_actual_never_matches(self):
        assert not self.checker.matches("John", None)

    def test_exact_match_is_reflexive(self):
        for value in ["John", "12/03/1980", "1,200.00", "Courtesy Car"]:
            assert self.checker.matches(value, value)

    def test_numeric_tolerance(self):
        checker = EquivalenceChecker(numeric_tolerance=Decimal("0.05"))
        assert checker.matches("1200.00", "1200")
        assert checker.matches("527.00", "527.05")
        assert not checker.matches("527.00", "527.06")
        assert not checker.matches("Berlin", "Munich")

    def test_numeric_tolerance_ignores_dates_and_identifiers(self):
        checker = EquivalenceChecker(numeric_tolerance=Decimal("1"))
        assert not checker.matches("12/03/1980", "12/03/1981")
        assert not checker.matches("12.03.1980", "12.03.1981")
        assert not checker.matches("12-03-1980", "12-03-1981")
        assert not checker.matches("4000", "4001")
        assert checker.matches("4000.00", "4001")
        assert checker.matches("1,200.00 $", "1200.50")

    @pytest.mark.parametrize("value,expected", [
        ("1,200.00 $", Decimal("1200.00")),
        ("€ 527", Decimal("527")),
        ("30000.40", Decimal("30000.40")),
        ("12/03/1980", None),
        ("12.03.1980", None),
        ("1.200,00", None),
        ("12,34", None),
        ("Berlin", None),
    ])
    def test_parse_amount(self, value, expected):
        assert parse_amount(value) == expected

    def test_tolerance_rule_runs_last(self):
        checker = EquivalenceChecker(numeric_tolerance=Decimal("0"))
        assert [name for name, _ in checker.rules] == [
            'exact', 'substring', 'date', 'numeric', 'numeric_tolerance'
        ]

    def test_custom_rules(self):
        checker = EquivalenceChecker(rules=[('exact', exact_match)])
        assert checker.matches("Berlin", "berlin")
        assert not checker.matches("Main St", "123 Main St")
