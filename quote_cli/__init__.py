"""
CLI package for the quote checker.

This package provides the command-line interface for validating generated
insurance quote PDFs against fixture data.
"""

from .version import __version__
