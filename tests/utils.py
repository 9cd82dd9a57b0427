"""Test utilities for building reviewer pools."""

from typing import Dict, List, Optional, Sequence

from lib.data_types import Reviewer


def make_reviewers(
    group: str,
    names: Sequence[str],
    day_mapper: Optional[Dict[str, Sequence[str]]] = None,
) -> List[Reviewer]:
    """
    Build reviewers of one group for testing purposes.

    Args:
        group: Group assigned to every reviewer
        names: Reviewer names
        day_mapper: Dict mapping reviewer names to their availability tags
    """
    day_mapper = day_mapper or {}
    return [
        Reviewer(
            name=name,
            group=group,
            day=frozenset(day_mapper[name]) if name in day_mapper else None,
        )
        for name in names
    ]
