"""
Unit tests for validation report rendering.
"""

import csv
import io
import json

import pytest

from quote_validation.models import FieldOutcome, ValidationReport
from quote_validation.report_generator import SimpleReportGenerator, get_summary_line
from quote_validation.validation_engine import ReportAssembler


def _sample_report():
    assembler = ReportAssembler()
    assembler.add(FieldOutcome('First Name', 'John', 'John', True,
                               "✓ First Name: Expected 'John' matches PDF value 'John'"))
    assembler.add(FieldOutcome('City', 'Munich', 'Berlin', False,
                               "✗ City: Expected 'Munich' but found 'Berlin'"))
    assembler.add(FieldOutcome('Occupation', 'Employee', None, False,
                               "⚠ Field 'Occupation' not found"))
    return assembler.build("First Name: John\nCity: Berlin")


class TestValidationReport:
    """Test report summary data."""

    def test_summary_statistics(self):
        summary = _sample_report().get_summary_statistics()
        assert summary == {
            'total_fields': 3,
            'matched_fields': 1,
            'mismatched_fields': 1,
            'not_found_fields': 1,
            'match_rate': 33,
            'is_valid': False,
        }

    def test_empty_report_statistics(self):
        summary = ValidationReport(is_valid=True).get_summary_statistics()
        assert summary['total_fields'] == 0
        assert summary['match_rate'] == 100

    def test_to_dict(self):
        data = _sample_report().to_dict()
        assert data['is_valid'] is False
        assert len(data['results']) == 3
        assert data['fields'][1]['status'] == 'MISMATCH'
        assert data['fields'][2]['actual_value'] is None
        assert data['raw_text'].startswith("First Name")

        assert 'raw_text' not in _sample_report().to_dict(include_raw_text=False)

    def test_summary_line(self):
        assert get_summary_line(_sample_report()) == "Summary: 1/3 fields matched (33%)"


class TestSimpleReportGenerator:
    """Test cases for SimpleReportGenerator class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.generator = SimpleReportGenerator()
        self.report = _sample_report()

    def test_json_report(self):
        data = json.loads(self.generator.generate_json_report(self.report))
        assert data['summary']['matched_fields'] == 1
        assert data['results'][0].startswith("✓ First Name")

    def test_json_report_without_raw_text(self):
        data = json.loads(self.generator.generate_json_report(self.report, include_raw_text=False))
        assert 'raw_text' not in data

    def test_txt_report(self):
        content = self.generator.generate_txt_report(self.report, source="quote.pdf")
        assert content.startswith("QUOTE PDF VALIDATION REPORT")
        assert "Source: quote.pdf" in content
        assert "Status: FAILED" in content
        assert "✗ City: Expected 'Munich' but found 'Berlin'" in content
        assert "Summary: 1/3 fields matched (33%)" in content
        assert "Not found: 1" in content

    def test_txt_report_passed(self):
        content = self.generator.generate_txt_report(ValidationReport(is_valid=True))
        assert "Status: PASSED" in content
        assert "No fields were validated." in content

    def test_csv_report(self):
        content = self.generator.generate_csv_report(self.report)
        assert content.startswith('\ufeff')

        rows = list(csv.DictReader(io.StringIO(content.lstrip('\ufeff'))))
        assert [row['Field'] for row in rows] == ['First Name', 'City', 'Occupation']
        assert rows[1]['Status'] == 'MISMATCH'
        assert rows[2]['Actual'] == 'NOT FOUND'
        assert rows[2]['Status'] == 'NOT FOUND'

    def test_comparison_rows(self):
        rows = self.generator.get_comparison_rows(self.report)
        assert rows[0] == {
            'Field': 'First Name',
            'Expected': 'John',
            'Actual': 'John',
            'Status': 'MATCH',
            'Message': "✓ First Name: Expected 'John' matches PDF value 'John'",
        }

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            self.generator.generate_report(self.report, 'xml')

    def test_write_reports(self, tmp_path):
        written = self.generator.write_reports(self.report, tmp_path / "reports",
                                               base_name="quote_validation")

        assert set(written.keys()) == {'txt', 'json', 'csv'}
        for report_format, path in written.items():
            assert path.exists()
            assert path.name == f"quote_validation.{report_format}"

        data = json.loads(written['json'].read_text(encoding='utf-8'))
        assert data['is_valid'] is False

    def test_write_selected_formats(self, tmp_path):
        written = self.generator.write_reports(self.report, tmp_path, formats=['txt'])
        assert list(written.keys()) == ['txt']
        assert not (tmp_path / "quote_validation.json").exists()
