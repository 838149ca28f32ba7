"""
Report generator that renders a ValidationReport in three formats:
1. JSON - the report as a dictionary
2. TXT - human-readable summary for manual review
3. CSV - one row per field for spreadsheet analysis
"""

import csv
import io
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .models import ValidationReport


logger = logging.getLogger(__name__)

REPORT_FORMATS = ('txt', 'json', 'csv')


class SimpleReportGenerator:
    """Simple report generator for quote validation reports."""

    def __init__(self, title: str = "QUOTE PDF VALIDATION REPORT"):
        self.title = title

    def generate_json_report(self, report: ValidationReport, include_raw_text: bool = True) -> str:
        return json.dumps(report.to_dict(include_raw_text=include_raw_text),
                          indent=2, ensure_ascii=False)

    def generate_txt_report(self, report: ValidationReport, source: Optional[str] = None) -> str:
        """Generate human-readable text summary."""
        summary = report.get_summary_statistics()
        lines = [
            self.title,
            "=" * 50,
        ]
        if source:
            lines.append(f"Source: {source}")
        lines.extend([
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            f"Status: {'PASSED' if report.is_valid else 'FAILED'}",
            "",
            "FIELD RESULTS",
            "-" * 50,
        ])
        lines.extend(report.results or ["No fields were validated."])
        lines.extend([
            "",
            "SUMMARY",
            "-" * 50,
            get_summary_line(report),
            f"Mismatched: {summary['mismatched_fields']}",
            f"Not found: {summary['not_found_fields']}",
        ])
        return "\n".join(lines)

    def generate_csv_report(self, report: ValidationReport) -> str:
        """Generate CSV with one row per validated field."""
        output = io.StringIO()

        # UTF-8 BOM for Excel compatibility
        output.write('\ufeff')

        fieldnames = ['Field', 'Expected', 'Actual', 'Status', 'Message']
        writer = csv.DictWriter(output, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(self.get_comparison_rows(report))
        return output.getvalue()

    def get_comparison_rows(self, report: ValidationReport) -> List[Dict[str, str]]:
        """Expected-vs-actual rows in report order."""
        return [
            {
                'Field': outcome.field_name,
                'Expected': outcome.expected_value,
                'Actual': outcome.actual_value if outcome.found else 'NOT FOUND',
                'Status': outcome.status,
                'Message': outcome.message,
            }
            for outcome in report.outcomes
        ]

    def generate_report(self, report: ValidationReport, report_format: str,
                        source: Optional[str] = None) -> str:
        if report_format == 'json':
            return self.generate_json_report(report)
        if report_format == 'txt':
            return self.generate_txt_report(report, source=source)
        if report_format == 'csv':
            return self.generate_csv_report(report)
        raise ValueError(f"Unsupported report format: {report_format}")

    def write_reports(self, report: ValidationReport, output_dir: Union[str, Path],
                      formats: Iterable[str] = REPORT_FORMATS,
                      base_name: str = "quote_validation",
                      source: Optional[str] = None) -> Dict[str, Path]:
        """
        Write the report in each requested format.

        Returns:
            Mapping of format to written file path
        """
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        written = {}
        for report_format in formats:
            content = self.generate_report(report, report_format, source=source)
            file_path = output_path / f"{base_name}.{report_format}"
            file_path.write_text(content, encoding='utf-8')
            written[report_format] = file_path
            logger.info(f"{report_format.upper()} report written to {file_path}")
        return written


def get_summary_line(report: ValidationReport) -> str:
    summary = report.get_summary_statistics()
    return (f"Summary: {summary['matched_fields']}/{summary['total_fields']} fields matched "
            f"({summary['match_rate']}%)")
