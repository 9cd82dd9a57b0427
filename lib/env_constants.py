import os
from enum import Enum

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())

DRIVE_SCOPE = [
    "https://www.googleapis.com/auth/drive",
    "https://www.googleapis.com/auth/drive.file",
]

GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")
GITHUB_API_VERSION = "2022-11-28"


def get_day_rollover() -> int:
    """
    Parse DAY_ROLLOVER environment variable.

    Returns:
        Number of following days allowed to top up a quota (0 = today only)
    """
    raw_value = os.environ.get("DAY_ROLLOVER", "").strip()
    if not raw_value:
        return DEFAULT_DAY_ROLLOVER

    return validate_day_rollover(raw_value, "DAY_ROLLOVER")


def validate_day_rollover(raw_value, source: str) -> int:
    """
    Convert a day rollover setting to an int within 0..MAX_DAY_ROLLOVER.

    Args:
        raw_value: Value read from the environment or the config file
        source: Name of the setting, used in error messages
    """
    try:
        day_rollover = int(raw_value)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"{source} must be an integer, got '{raw_value}'"
        ) from exc

    if not 0 <= day_rollover <= MAX_DAY_ROLLOVER:
        raise ValueError(
            f"{source} must be between 0 and {MAX_DAY_ROLLOVER}, "
            f"got {day_rollover}"
        )
    return day_rollover


# Weekday keys, in calendar order (date.weekday(): Monday == 0)
DAYS_OF_WEEK = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")
WEEKEND_DAYS = frozenset(("sat", "sun"))
WORKING_DAYS = frozenset(DAYS_OF_WEEK) - WEEKEND_DAYS


class AvailabilityTags(str, Enum):
    """Availability tags besides plain weekday abbreviations"""

    EVERYDAY = "everyday"
    WEEKDAY = "weekday"
    WEEKEND = "weekend"


VALID_DAY_TAGS = frozenset(DAYS_OF_WEEK) | {tag.value for tag in AvailabilityTags}

# Markers in a PR title that mean "work in progress"
WIP_MARKERS = ("WIP", "wip")


# Worksheet indices (0-based) inside the configuration spreadsheet
class SheetIndices(int, Enum):
    """Tabs of the configuration spreadsheet"""

    REVIEWERS = 0
    QUOTA = 1


class ReviewersColumns(str, Enum):
    """Column names for the Reviewers tab"""

    REVIEWER = "Reviewer"  # GitHub login
    GROUP = "Group"  # Team / category name
    # Comma-separated availability tags, empty = every day
    DAYS = "Days"


class QuotaColumns(str, Enum):
    """Column names for the Quota tab"""

    GROUP = "Group"
    # Minimum reviewers requested from this group per PR
    REVIEWER_COUNT = "Number of Reviewers"


EXPECTED_HEADERS_FOR_REVIEWERS = [column.value for column in ReviewersColumns]
EXPECTED_HEADERS_FOR_QUOTA = [column.value for column in QuotaColumns]

# YAML configuration keys
QUOTA_KEY = "numOfReviewers"
REVIEWERS_KEY = "reviewers"
DAY_ROLLOVER_KEY = "dayRollover"

# Default values
DEFAULT_DAY_ROLLOVER = 0  # Canonical policy: today's pool only
# Looking further ahead than a week would revisit today's pool
MAX_DAY_ROLLOVER = len(DAYS_OF_WEEK) - 1
