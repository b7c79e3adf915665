"""
Command-line interface package for Excel Download.

This package contains the components of the CLI:
- Command argument parsing
- Main application runner
- Terminal color formatting
"""

from excel_download.cli.app import run_app
from excel_download.cli.parsers import parse_args
from excel_download.cli.utils import print_header, ORANGE, WHITE, BOLD, RESET

__all__ = [
    # Main functions
    'run_app',       # Main application entry point
    'parse_args',    # Command-line argument parser
    'print_header',  # Utility for printing formatted headers

    # Terminal colors and styles
    'ORANGE',
    'WHITE',
    'BOLD',
    'RESET',
]
