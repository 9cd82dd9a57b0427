"""
Availability Index

Partitions the reviewer pool by group and weekday, following each
reviewer's declared availability:

- no "day" value       → available every day
- "everyday"           → available every day
- "weekday"            → Monday to Friday
- "weekend"            → Saturday and Sunday
- "mon", "tue", ...    → that specific day

EXAMPLE:
Reviewers: alice (core, weekday), bob (core), carol (docs, sat)

Index:
    core → mon..fri: [alice, bob], sat/sun: [bob]
    docs → sat: [carol], every other day: []
"""

from datetime import date
from typing import Dict, Iterable, List

from lib.data_types import Reviewer
from lib.env_constants import (
    DAYS_OF_WEEK,
    WEEKEND_DAYS,
    WORKING_DAYS,
    AvailabilityTags,
)

AvailabilityIndex = Dict[str, Dict[str, List[Reviewer]]]


def day_abbreviation(day: date) -> str:
    """Lowercase three-letter weekday of a date ("mon" .. "sun")"""
    return DAYS_OF_WEEK[day.weekday()]


def is_available_on(reviewer: Reviewer, day: str) -> bool:
    """Check whether a reviewer can be requested on the given weekday key"""
    if reviewer.day is None:
        return True

    tags = reviewer.day
    return (
        day in tags
        or AvailabilityTags.EVERYDAY.value in tags
        or (day in WEEKEND_DAYS and AvailabilityTags.WEEKEND.value in tags)
        or (day in WORKING_DAYS and AvailabilityTags.WEEKDAY.value in tags)
    )


def build_availability_index(
    reviewers: Iterable[Reviewer], groups: Iterable[str] = ()
) -> AvailabilityIndex:
    """
    Build the group → weekday → reviewers lookup.

    Args:
        reviewers: Reviewer pool
        groups: Extra group names to pre-initialize (e.g. every group
            named in the quota), so lookups never miss a key

    Returns:
        Nested dict with every known group mapped to all seven weekdays
    """
    reviewers = list(reviewers)

    known_groups = list(dict.fromkeys([r.group for r in reviewers] + list(groups)))
    index: AvailabilityIndex = {
        group: {day: [] for day in DAYS_OF_WEEK} for group in known_groups
    }

    for reviewer in reviewers:
        for day in DAYS_OF_WEEK:
            if is_available_on(reviewer, day):
                index[reviewer.group][day].append(reviewer)

    return index
