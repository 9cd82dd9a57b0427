"""
Configuration Loader

Loads the reviewer pool and the per-group quota, either from a YAML file
committed to the repository (CONFIG_FILE) or from a Google Sheet
(SHEET_NAME), so the rotation can be managed by non-developers.

YAML format:
    numOfReviewers:
      core: 2
      docs: 1
    dayRollover: 0
    reviewers:
      - name: alice
        group: core
        day: [weekday]
      - name: bob
        group: docs

Google Sheet format:
- Tab 0 "Reviewers": Reviewer | Group | Days (comma-separated, empty = every day)
- Tab 1 "Quota":     Group | Number of Reviewers
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml

from lib.data_types import Reviewer, ReviewerConfig
from lib.env_constants import (
    DAY_ROLLOVER_KEY,
    DEFAULT_DAY_ROLLOVER,
    EXPECTED_HEADERS_FOR_QUOTA,
    EXPECTED_HEADERS_FOR_REVIEWERS,
    QUOTA_KEY,
    REVIEWERS_KEY,
    VALID_DAY_TAGS,
    QuotaColumns,
    ReviewersColumns,
    SheetIndices,
    get_day_rollover,
    validate_day_rollover,
)
from lib.utilities import load_records_from_sheet, parse_comma_separated


def parse_day_tags(name: str, raw_tags: Iterable[str] | None) -> Optional[frozenset]:
    """
    Normalize availability tags, dropping unknown ones.

    Returns:
        None when no tags were given (available every day), otherwise the
        frozen set of known tags. An empty set means never available.
    """
    if raw_tags is None:
        return None

    tags = set()
    for tag in raw_tags:
        normalized = str(tag).strip().lower()
        if not normalized:
            continue
        if normalized not in VALID_DAY_TAGS:
            print(
                f"⚠️  Warning: Unknown day '{tag}' for reviewer '{name}' - ignored"
            )
            continue
        tags.add(normalized)

    return frozenset(tags)


def parse_reviewer(entry: Dict[str, Any]) -> Reviewer:
    """Build a Reviewer from a config entry ({name, group, day})"""
    name = str(entry.get("name") or "").strip()
    group = str(entry.get("group") or "").strip()
    if not name or not group:
        raise ValueError(f"Reviewer entry needs both 'name' and 'group': {entry}")

    raw_day = entry.get("day")
    if isinstance(raw_day, str):
        raw_day = parse_comma_separated(raw_day)

    return Reviewer(name=name, group=group, day=parse_day_tags(name, raw_day))


def parse_quota(raw_quota: Dict[str, Any]) -> Dict[str, int]:
    """Validate the group -> reviewer count mapping"""
    quota: Dict[str, int] = {}
    for group, raw_count in raw_quota.items():
        try:
            count = int(raw_count)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Number of reviewers for group '{group}' must be an integer, "
                f"got '{raw_count}'"
            ) from exc
        if count < 0:
            raise ValueError(
                f"Number of reviewers for group '{group}' cannot be negative"
            )
        quota[str(group).strip()] = count
    return quota


def warn_about_unknown_groups(config: ReviewerConfig) -> None:
    known_groups = {reviewer.group for reviewer in config.reviewers}
    for group in config.quota:
        if group not in known_groups:
            print(
                f"⚠️  Warning: Group '{group}' has a quota but no reviewers"
            )


def load_config_from_dict(
    data: Dict[str, Any], day_rollover: int | None = None
) -> ReviewerConfig:
    """
    Build a ReviewerConfig from parsed YAML data.

    Args:
        data: Parsed YAML document
        day_rollover: Overrides the dayRollover key when given
    """
    if not isinstance(data, dict):
        raise ValueError("Configuration must be a mapping")

    reviewers = [parse_reviewer(entry) for entry in data.get(REVIEWERS_KEY) or []]
    quota = parse_quota(data.get(QUOTA_KEY) or {})

    if day_rollover is None:
        day_rollover = data.get(DAY_ROLLOVER_KEY)
        if day_rollover is None:
            day_rollover = DEFAULT_DAY_ROLLOVER
    day_rollover = validate_day_rollover(day_rollover, DAY_ROLLOVER_KEY)

    config = ReviewerConfig(
        reviewers=reviewers, quota=quota, day_rollover=day_rollover
    )
    warn_about_unknown_groups(config)
    return config


def load_config_from_file(path: str | Path) -> ReviewerConfig:
    """Load configuration from a YAML file"""
    try:
        data = yaml.safe_load(Path(path).read_text()) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    config = load_config_from_dict(data)
    print(
        f"Config loaded from {path}: "
        f"Reviewers={len(config.reviewers)}, Groups={sorted(config.quota)}"
    )
    return config


def load_config_from_sheet(sheet_name: str | None = None) -> ReviewerConfig:
    """
    Load configuration from the Reviewers and Quota tabs of a Google Sheet.

    Args:
        sheet_name: Optional name of the Google Sheet file to open.
            If None, uses SHEET_NAME from environment variable.
    """
    reviewer_records = load_records_from_sheet(
        EXPECTED_HEADERS_FOR_REVIEWERS, SheetIndices.REVIEWERS, sheet_name
    )
    quota_records = load_records_from_sheet(
        EXPECTED_HEADERS_FOR_QUOTA, SheetIndices.QUOTA, sheet_name
    )

    reviewers: List[Reviewer] = [
        parse_reviewer(
            {
                "name": record[ReviewersColumns.REVIEWER.value],
                "group": record[ReviewersColumns.GROUP.value],
                "day": parse_comma_separated(
                    str(record[ReviewersColumns.DAYS.value])
                )
                or None,
            }
        )
        for record in reviewer_records
        if str(record[ReviewersColumns.REVIEWER.value]).strip()
    ]
    quota = parse_quota(
        {
            record[QuotaColumns.GROUP.value]: record[QuotaColumns.REVIEWER_COUNT.value]
            for record in quota_records
            if str(record[QuotaColumns.GROUP.value]).strip()
        }
    )

    config = ReviewerConfig(
        reviewers=reviewers, quota=quota, day_rollover=get_day_rollover()
    )
    warn_about_unknown_groups(config)
    print(
        f"Config loaded from sheet: "
        f"Reviewers={len(config.reviewers)}, Groups={sorted(config.quota)}"
    )
    return config


def load_config() -> ReviewerConfig:
    """
    Load configuration from CONFIG_FILE if set, otherwise from SHEET_NAME.
    """
    config_file = os.environ.get("CONFIG_FILE", "").strip()
    if config_file:
        config = load_config_from_file(config_file)
        if os.environ.get("DAY_ROLLOVER", "").strip():
            config.day_rollover = get_day_rollover()
        return config

    if os.environ.get("SHEET_NAME", "").strip():
        return load_config_from_sheet()

    raise ValueError(
        "No configuration source: set CONFIG_FILE or SHEET_NAME"
    )
