"""Test fixtures for pytest."""

from copy import deepcopy
from datetime import date
from typing import Dict, Generator, List
from unittest.mock import patch

import pytest
from gspread import Worksheet

from lib.data_types import PullRequest, Reviewer

# 2024-01-01 is a Monday
MONDAY = date(2024, 1, 1)
SATURDAY = date(2024, 1, 6)
SUNDAY = date(2024, 1, 7)

REVIEWERS_SHEET = [
    {"Reviewer": "alice", "Group": "core", "Days": "weekday"},
    {"Reviewer": "bob", "Group": "core", "Days": ""},
    {"Reviewer": "carol", "Group": "core", "Days": "sat, sun"},
    {"Reviewer": "dave", "Group": "docs", "Days": "everyday"},
]

QUOTA_SHEET = [
    {"Group": "core", "Number of Reviewers": 2},
    {"Group": "docs", "Number of Reviewers": "1"},
]

REVIEWERS = [
    Reviewer(name="A", group="core"),
    Reviewer(name="B", group="core"),
    Reviewer(name="C", group="core"),
]


@pytest.fixture(scope="function")
def mocked_sheet() -> Generator[Worksheet, None, None]:
    """Provide a mocked worksheet for testing."""
    with patch("lib.utilities.get_remote_sheet") as mocked_get_remote_sheet:
        with mocked_get_remote_sheet() as mocked_sheet:
            yield mocked_sheet


@pytest.fixture(scope="function")
def mocked_sheet_data(
    mocked_sheet: Worksheet,
) -> Generator[List[List[Dict[str, str]]], None, None]:
    """Provide Reviewers tab then Quota tab records, in read order."""
    mocked_sheet.get_all_records.side_effect = [REVIEWERS_SHEET, QUOTA_SHEET]
    yield [REVIEWERS_SHEET, QUOTA_SHEET]


@pytest.fixture(scope="function")
def mocked_reviewers() -> Generator[List[Reviewer], None, None]:
    """Provide a fresh copy of reviewer test data."""
    reviewers = deepcopy(REVIEWERS)
    yield reviewers


@pytest.fixture(scope="function")
def open_pr() -> PullRequest:
    return PullRequest(author="A", title="Add rotation", requested_reviewers=())
