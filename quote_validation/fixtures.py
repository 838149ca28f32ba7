"""
Fixture loading and normalization.

Fixtures are CSV files with a header row and one row per quote scenario.
Column names are not consistent between fixture sources (``firstname``,
``firstName``, ``first_name``), so every record is normalized once to
canonical keys before any field lookup.
"""

import csv
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .exceptions import FixtureError


logger = logging.getLogger(__name__)

# Columns of the quote workflow fixture file.
FIXTURE_FIELDS = [
    'make', 'enginePerformance', 'numberofseats', 'fuel', 'listprice',
    'licenseplatenumber', 'annualmileage', 'firstname', 'lastname',
    'dateofbirth', 'streetaddress', 'country', 'zipcode', 'city',
    'occupation', 'website', 'insurancesum', 'meritrating',
    'damageinsurance', 'courtesycar', 'email', 'phone', 'username',
    'password', 'confirmpassword', 'comments'
]

KEY_SEPARATORS = re.compile(r'[\s_\-]+')


def canonical_key(key: str) -> str:
    """Collapse camelCase, snake_case and spaced keys to one lowercase form."""
    return KEY_SEPARATORS.sub('', str(key)).lower()


def normalize_fixture(fixture: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Return a copy of ``fixture`` keyed by canonical key.

    Values are converted to stripped strings. Blank values are dropped, and
    when two keys collapse to the same canonical key the first non-blank
    value wins.
    """
    normalized: Dict[str, str] = {}
    if not fixture:
        return normalized

    for key, value in fixture.items():
        if value is None:
            continue
        text = str(value).strip()
        if not text:
            continue
        normalized.setdefault(canonical_key(key), text)
    return normalized


def load_fixtures(file_path: Union[str, Path]) -> List[Dict[str, str]]:
    """
    Read every data row of a fixture CSV file.

    Args:
        file_path: Path to the CSV file

    Returns:
        List of records keyed by the header columns

    Raises:
        FixtureError: If the file is missing or holds no data rows
    """
    path = Path(file_path).resolve()
    if not path.is_file():
        raise FixtureError(f"Fixture file not found: {path}", fixture_path=str(path))

    try:
        with open(path, 'r', encoding='utf-8-sig', newline='') as csvfile:
            reader = csv.DictReader(csvfile)
            if not reader.fieldnames:
                raise FixtureError(
                    'CSV file must have at least a header and one data row',
                    fixture_path=str(path)
                )
            headers = [header.strip() for header in reader.fieldnames]
            reader.fieldnames = headers

            records = []
            for row in reader:
                if not any((value or '').strip() for value in row.values() if isinstance(value, str)):
                    continue
                records.append({
                    header: (row.get(header) or '').strip()
                    for header in headers
                })
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        raise FixtureError(
            f"Error reading fixture file: {e}",
            fixture_path=str(path)
        ) from e

    if not records:
        raise FixtureError(
            'CSV file must have at least a header and one data row',
            fixture_path=str(path)
        )

    logger.info(f"Loaded {len(records)} fixture row(s) from {path}")
    return records


def load_fixture_row(file_path: Union[str, Path], row_index: int = 0) -> Dict[str, str]:
    """
    Read a single data row (0-based, header excluded) from a fixture file.

    Raises:
        FixtureError: If the row index is out of bounds
    """
    records = load_fixtures(file_path)
    if row_index < 0 or row_index >= len(records):
        raise FixtureError(
            f"Row index {row_index} out of bounds. Total rows: {len(records)}",
            fixture_path=str(file_path),
            row_index=row_index
        )
    return records[row_index]
