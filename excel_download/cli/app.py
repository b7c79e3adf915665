"""
Excel Download - Main Application Logic

Runs a download from the command line:
1. Parse command-line arguments
2. Load the records (a CSV/JSON file, or the contact-info demo data)
3. Prepare the workbook request
4. Build, encode and save the spreadsheet
"""

import os

from excel_download.cli.parsers import parse_args
from excel_download.cli.utils import ORANGE, RESET, print_header
from excel_download.contacts import CONTACT_INFO_FILENAME, build_contact_workbook, get_contact_info
from excel_download.export.excel_export import download_excel
from excel_download.export.models import WorkbookSpec, WorksheetSpec
from excel_download.records import load_records


def build_file_workbook(args):
    """Prepare a workbook request for records loaded from --input."""
    records = load_records(args.input)
    print(f"{ORANGE}Loaded {len(records)} records from {args.input}{RESET}")

    filename = args.filename or os.path.splitext(os.path.basename(args.input))[0]
    return WorkbookSpec(
        filename=filename,
        worksheets=[
            WorksheetSpec(
                records=records,
                worksheet_name=args.worksheet_name,
                default_column_width=args.default_width,
            ),
        ],
    )


def build_demo_workbook(args):
    """Prepare the contact-info workbook request."""
    contacts = get_contact_info()
    print(f"{ORANGE}Loaded {len(contacts)} contacts{RESET}")

    return build_contact_workbook(
        contacts,
        filename=args.filename or CONTACT_INFO_FILENAME,
        default_column_width=args.default_width,
    )


def run_app(argv=None):
    """Main application logic. Returns the process exit code."""
    try:
        args = parse_args(argv)

        print_header("Loading Records")
        if args.input:
            workbook = build_file_workbook(args)
        else:
            workbook = build_demo_workbook(args)

        print_header("Exporting to Excel")
        output_path = download_excel(workbook, args.output_dir)
        print(f"{ORANGE}File downloaded: {output_path}{RESET}")

        return 0

    except KeyboardInterrupt:
        print(f"\n{ORANGE}Operation cancelled by user. Exiting.{RESET}")
        return 1
    except Exception as e:
        print(f"\n{ORANGE}An error occurred: {str(e)}{RESET}")
        import traceback
        traceback.print_exc()
        return 1
