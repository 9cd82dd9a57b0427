import os
from contextlib import contextmanager
from typing import Dict, Iterator, List

import gspread
from gspread import Worksheet
from oauth2client.service_account import ServiceAccountCredentials
from dotenv import find_dotenv, load_dotenv

from lib.env_constants import DRIVE_SCOPE, SheetIndices

load_dotenv(find_dotenv())


def parse_comma_separated(value: str) -> List[str]:
    """Parse a comma-separated cell into a list of trimmed, non-empty names"""
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


@contextmanager
def get_remote_sheet(
    sheet_index: int = SheetIndices.REVIEWERS, sheet_name: str | None = None
) -> Iterator[Worksheet]:
    """
    Fetch the Worksheet data from remote Google sheet

    Args:
        sheet_index: Index of the sheet tab (0=Reviewers, 1=Quota)
        sheet_name: Name of the Google Sheet file to open.
            If None, uses SHEET_NAME environment variable.
    """
    CREDENTIAL_FILE = os.environ.get("CREDENTIAL_FILE")

    if sheet_name is None:
        sheet_name = os.environ.get("SHEET_NAME", "").strip()

    if not sheet_name:
        raise ValueError(
            "Sheet name must be provided either as parameter or "
            "via SHEET_NAME environment variable"
        )

    credential = ServiceAccountCredentials.from_json_keyfile_name(
        CREDENTIAL_FILE, DRIVE_SCOPE
    )
    client = gspread.authorize(credential)
    spreadsheet = client.open(sheet_name)
    # Get sheet by index (0-based)
    sheet = spreadsheet.get_worksheet(int(sheet_index))
    try:
        yield sheet
    finally:
        client.session.close()


def load_records_from_sheet(
    expected_headers: List[str],
    sheet_index: int,
    sheet_name: str | None = None,
) -> List[Dict[str, str]]:
    """Read all rows of a tab as header-keyed records"""
    with get_remote_sheet(sheet_index, sheet_name) as sheet:
        records = sheet.get_all_records(expected_headers=expected_headers)

    return list(records)
