"""
PR Reviewer Selection

Picks reviewers for a single pull request from the rotation pool.

BUSINESS LOGIC:
1. Skip policy (checked first):
   - PR not found, draft PR, or "WIP"/"wip" in the title → no reviewers

2. For every group in the quota (in quota order):
   a) Eligible pool: the group's reviewers available TODAY, minus the
      PR author
   b) Already-satisfied: reviewers already requested on the PR that are
      in the eligible pool each count towards the group's quota
   c) Remaining slots are drawn at random (uniform, without replacement)
      from the eligible pool, excluding the author, reviewers already
      requested and reviewers picked for earlier groups

3. Shortfall:
   - If the pool is too small, fewer reviewers are returned (warning only)
   - With day_rollover=N, the pools of the next N calendar days are used
     to top up the missing slots before giving up

EXAMPLE:
Reviewers: A, B, C (all "core", available every day)
Quota: core=2
PR author: A, already requested: B

Selection:
1. Eligible pool: {B, C} (A is the author)
2. Already satisfied: B → 1 of 2
3. Draw 1 from {C} → C
Result: ["C"]
"""

import random
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Set, Tuple

from lib.availability import build_availability_index, day_abbreviation
from lib.data_types import PullRequest, Reviewer, ReviewerConfig
from lib.env_constants import MAX_DAY_ROLLOVER, WIP_MARKERS


def should_skip(pr: Optional[PullRequest]) -> Tuple[bool, str]:
    """
    Decide whether reviewer selection must be skipped for a PR.

    Returns:
        Tuple of (should_skip, reason)
    """
    if pr is None:
        return True, "Pull request not found"
    if pr.draft:
        return True, "Pull request is a draft"
    if any(marker in pr.title for marker in WIP_MARKERS):
        return True, f"Pull request title marks it as work in progress: '{pr.title}'"
    return False, ""


def sample_names(available_names: Iterable[str], number_of_names: int) -> List[str]:
    """
    Draw reviewer names uniformly at random, without replacement.

    Args:
        available_names: Names to draw from
        number_of_names: How many names to draw

    Returns:
        At most number_of_names distinct names
    """
    if number_of_names <= 0:
        return []

    names = sorted(set(available_names))
    if len(names) <= number_of_names:
        return names

    return random.sample(names, number_of_names)


def select_reviewers(
    quota: Dict[str, int],
    reviewers: List[Reviewer],
    pr: PullRequest,
    today: Optional[date] = None,
    day_rollover: int = 0,
) -> List[str]:
    """
    Select new reviewers for every group of the quota.

    Args:
        quota: Group name -> minimum number of reviewers for the PR
        reviewers: Reviewer pool
        pr: Snapshot of the pull request
        today: Date used for availability (defaults to the current date)
        day_rollover: How many following days may top up a short pool

    Returns:
        Reviewer names to request, grouped in quota order
    """
    if not 0 <= day_rollover <= MAX_DAY_ROLLOVER:
        raise ValueError(
            f"day_rollover must be between 0 and {MAX_DAY_ROLLOVER}, "
            f"got {day_rollover}"
        )

    today = today or date.today()
    today_key = day_abbreviation(today)
    index = build_availability_index(reviewers, quota.keys())
    requested = set(pr.requested_reviewers)

    print("\n📊 Reviewer Selection Summary:")
    print(f"   Day: {today_key} ({today.isoformat()})")
    print(f"   PR author: {pr.author}")
    print(f"   Already requested: {sorted(requested) if requested else '(none)'}")
    print(f"   Groups to process: {len(quota)}\n")

    selected_names: List[str] = []

    for group, required in quota.items():
        eligible = {r.name for r in index[group][today_key]} - {pr.author}
        already_satisfied = sum(
            1 for name in pr.requested_reviewers if name in eligible
        )
        needed = required - already_satisfied

        print(f"🔄 Processing Group: {group}")
        print(f"   Eligible today: {sorted(eligible) if eligible else '(none)'}")
        print(f"   Needs: {required} (already satisfied: {already_satisfied})")

        if needed <= 0:
            print("   ✅ Quota already met\n")
            continue

        excluded: Set[str] = requested | {pr.author} | set(selected_names)
        picks = sample_names(eligible - excluded, needed)

        for offset in range(1, day_rollover + 1):
            if len(picks) >= needed:
                break
            next_day = day_abbreviation(today + timedelta(days=offset))
            pool = {r.name for r in index[group][next_day]} - excluded - set(picks)
            top_up = sample_names(pool, needed - len(picks))
            if top_up:
                print(f"   Topping up from {next_day}: {sorted(top_up)}")
            picks += top_up

        if len(picks) < needed:
            print(
                f"   ⚠️  WARNING: Only {len(picks)} of {needed} reviewers "
                f"available for group '{group}'"
            )

        selected_names.extend(sorted(picks))
        print(f"   ✅ Selected: {sorted(picks) if picks else '(none)'}\n")

    return selected_names


def pick_reviewers_for_pull_request(
    config: ReviewerConfig,
    pr: Optional[PullRequest],
    today: Optional[date] = None,
) -> List[str]:
    """
    Apply the skip policy, then select reviewers for the PR.

    Returns:
        Reviewer names to request (empty when the PR is skipped)
    """
    skip, reason = should_skip(pr)
    if skip:
        print(f"⏭️  Skipping reviewer selection: {reason}")
        return []

    return select_reviewers(
        config.quota,
        config.reviewers,
        pr,
        today=today,
        day_rollover=config.day_rollover,
    )
