"""
CLI Context module for the quote checker.

This module provides the shared context and decorator used across CLI
commands, preventing circular imports between quote_cli.main and the command
modules.
"""

import os
from decimal import Decimal, InvalidOperation
from typing import Optional

import click

from quote_cli.exceptions import ConfigurationError
from quote_validation.models import MismatchMode, ValidationConfiguration


class CLIContext:
    """Context object to share state between CLI commands."""

    def __init__(self):
        self.verbose = False
        self.quiet = False
        # Environment variables provide defaults for command options
        self.fixtures_path = os.environ.get('QUOTE_CHECKER_FIXTURES')
        self.on_mismatch = os.environ.get('QUOTE_CHECKER_ON_MISMATCH', MismatchMode.COLLECT.value)
        self.output_dir = os.environ.get('QUOTE_CHECKER_OUTPUT_DIR')

    def get_configuration(self, on_mismatch: Optional[str] = None,
                          include_raw_text: bool = True,
                          numeric_tolerance: Optional[str] = None) -> ValidationConfiguration:
        """
        Build a validation configuration from command options and defaults.

        Raises:
            ConfigurationError: If the mismatch mode or tolerance is invalid
        """
        mode = on_mismatch or self.on_mismatch
        try:
            mode = MismatchMode(str(mode).strip().lower())
        except ValueError:
            valid = ', '.join(m.value for m in MismatchMode)
            raise ConfigurationError(f"Invalid mismatch mode '{mode}'. Valid modes: {valid}")

        tolerance = None
        if numeric_tolerance is not None:
            try:
                tolerance = Decimal(str(numeric_tolerance))
            except InvalidOperation:
                raise ConfigurationError(f"Invalid numeric tolerance '{numeric_tolerance}'")
            if tolerance < 0:
                raise ConfigurationError("Numeric tolerance cannot be negative")

        return ValidationConfiguration(
            on_mismatch=mode,
            include_raw_text=include_raw_text,
            numeric_tolerance=tolerance
        )


# Pass context between commands
pass_context = click.make_pass_decorator(CLIContext, ensure=True)
