"""
Excel Download - Command Line Argument Parsing

Command-line arguments:
--input, -i          : CSV or JSON file of records (exports the contact-info demo if omitted)
--filename, -f       : Output file name without extension
--output-dir, -o     : Output directory (defaults to EXCEL_DOWNLOAD_DIR env variable or '.')
--worksheet-name, -w : Worksheet title for --input exports
--default-width, -d  : Default column width: 'auto', a positive number, or 'none'

Example usage:
    python main.py --input contacts.csv --default-width 20 --output-dir reports
"""

import argparse
import os

from excel_download.cli.utils import ORANGE, RESET
from excel_download.export.models import AUTO_WIDTH


def parse_width(value):
    """
    Parse a --default-width value.

    Returns:
        'auto', a positive int/float, or None for 'none'

    Raises:
        argparse.ArgumentTypeError: If the value is not a valid width
    """
    text = value.strip().lower()
    if text == AUTO_WIDTH:
        return AUTO_WIDTH
    if text == 'none':
        return None

    try:
        width = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width '{value}' (use 'auto', 'none' or a number)")

    if width <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive, got {value}")
    return int(width) if width.is_integer() else width


def build_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description=f"{ORANGE}Excel Download - export records to an xlsx spreadsheet{RESET}"
    )

    parser.add_argument(
        "--input", "-i",
        default=None,
        help="CSV or JSON file of records (exports the contact-info demo if omitted)"
    )

    parser.add_argument(
        "--filename", "-f",
        default=None,
        help="Output file name without extension (defaults to 'contact-info' or the input file name)"
    )

    parser.add_argument(
        "--output-dir", "-o",
        default=os.environ.get("EXCEL_DOWNLOAD_DIR", "."),
        help="Output directory (defaults to EXCEL_DOWNLOAD_DIR env variable or the current directory)"
    )

    parser.add_argument(
        "--worksheet-name", "-w",
        default=None,
        help="Worksheet name for --input exports (defaults to 'Sheet1')"
    )

    parser.add_argument(
        "--default-width", "-d",
        type=parse_width,
        default=AUTO_WIDTH,
        help="Default column width: 'auto', a positive number, or 'none' (defaults to 'auto')"
    )

    return parser


def parse_args(argv=None):
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
