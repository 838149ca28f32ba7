"""
CLI command modules for the quote checker.

- validate_commands: Quote PDF validation against fixture rows
- extract_commands: Field extraction debug output
- fixture_commands: Fixture file inspection
"""

from . import (
    validate_commands,
    extract_commands,
    fixture_commands
)

__all__ = [
    'validate_commands',
    'extract_commands',
    'fixture_commands'
]
