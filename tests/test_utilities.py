"""Tests for sheet helpers"""

import os
from unittest.mock import patch

import pytest

from lib.env_constants import DRIVE_SCOPE, SheetIndices
from lib.utilities import get_remote_sheet, parse_comma_separated


class TestParseCommaSeparated:
    def test_empty_string(self):
        assert parse_comma_separated("") == []

    def test_with_extra_spaces(self):
        assert parse_comma_separated("  mon  ,  wed ,, fri ") == ["mon", "wed", "fri"]


class TestGetRemoteSheet:
    @patch.dict(os.environ, {"CREDENTIAL_FILE": "creds.json", "SHEET_NAME": "Rotation"})
    @patch("lib.utilities.gspread.authorize")
    @patch("lib.utilities.ServiceAccountCredentials.from_json_keyfile_name")
    def test_opens_tab_by_index(self, mocked_credentials, mocked_authorize):
        client = mocked_authorize.return_value
        spreadsheet = client.open.return_value

        with get_remote_sheet(SheetIndices.QUOTA) as sheet:
            assert sheet is spreadsheet.get_worksheet.return_value

        mocked_credentials.assert_called_once_with("creds.json", DRIVE_SCOPE)
        client.open.assert_called_once_with("Rotation")
        spreadsheet.get_worksheet.assert_called_once_with(1)
        client.session.close.assert_called_once_with()

    @patch.dict(os.environ, {"SHEET_NAME": ""})
    def test_requires_sheet_name(self):
        with pytest.raises(ValueError, match="Sheet name must be provided"):
            with get_remote_sheet():
                pass
