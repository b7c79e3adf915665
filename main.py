#!/usr/bin/env python3
"""
Excel Download - Main Entry Point

Exports records to an xlsx spreadsheet. Without --input, exports the
contact-info demo list.

Usage:
    python main.py [--input <records.csv|records.json>] [options]

Options:
    --input, -i           CSV or JSON file of records
    --filename, -f        Output file name without extension
    --output-dir, -o      Output directory (or set EXCEL_DOWNLOAD_DIR env variable)
    --worksheet-name, -w  Worksheet name for --input exports
    --default-width, -d   Default column width: auto, a number, or none
"""

import sys

from excel_download.cli.app import run_app

if __name__ == "__main__":
    # Use the exit code to indicate success (0) or failure (non-zero)
    sys.exit(run_app())
