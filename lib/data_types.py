"""Data type definitions for the PR reviewer rotation."""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple


@dataclass(frozen=True)
class Reviewer:
    """
    Represents a reviewer in the rotation pool.

    Attributes:
        name: GitHub login of the reviewer
        group: Group (team) the reviewer belongs to
        day: Availability tags (weekday abbreviations, "everyday",
            "weekday", "weekend"). None means available every day.
    """

    name: str
    group: str
    day: Optional[FrozenSet[str]] = None


@dataclass(frozen=True)
class PullRequest:
    """
    Snapshot of the pull request state a selection run works on.

    Attributes:
        author: Login of the PR author
        title: PR title
        requested_reviewers: Logins already requested for review
        draft: Whether the PR is a draft
    """

    author: str
    title: str
    requested_reviewers: Tuple[str, ...] = ()
    draft: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PullRequest":
        """Build a snapshot from a GitHub pulls API payload"""
        return cls(
            author=(data.get("user") or {}).get("login", ""),
            title=data.get("title") or "",
            requested_reviewers=tuple(
                user["login"] for user in data.get("requested_reviewers") or []
            ),
            draft=bool(data.get("draft", False)),
        )


@dataclass(frozen=True)
class ExecutionContext:
    """
    Identifies the pull request a run targets.

    Attributes:
        owner: Repository owner (user or organization)
        repo: Repository name
        pr_number: Pull request number
    """

    owner: str
    repo: str
    pr_number: int

    @classmethod
    def from_env(cls) -> "ExecutionContext":
        """
        Build the context from GitHub Actions environment variables.

        GITHUB_REPOSITORY: "owner/repo"
        GITHUB_REF: "refs/pull/<number>/merge"
        """
        repository = os.environ.get("GITHUB_REPOSITORY", "").strip()
        ref = os.environ.get("GITHUB_REF", "").strip()
        return cls.from_strings(repository, ref)

    @classmethod
    def from_strings(cls, repository: str, ref: str) -> "ExecutionContext":
        owner, _, repo = repository.partition("/")
        if not owner or not repo:
            raise ValueError(
                f"GITHUB_REPOSITORY must look like 'owner/repo', got '{repository}'"
            )

        prefix = "refs/pull/"
        if not ref.startswith(prefix):
            raise ValueError(
                f"GITHUB_REF does not reference a pull request: '{ref}'"
            )

        pr_part = ref[len(prefix):].split("/")[0]
        if not pr_part.isdigit():
            raise ValueError(f"Could not parse PR number from GITHUB_REF: '{ref}'")

        return cls(owner=owner, repo=repo, pr_number=int(pr_part))


@dataclass
class ReviewerConfig:
    """
    Configuration for a selection run.

    Attributes:
        reviewers: Reviewer pool
        quota: Group name -> minimum number of reviewers per PR
        day_rollover: Following days allowed to top up a quota
    """

    reviewers: List[Reviewer] = field(default_factory=list)
    quota: Dict[str, int] = field(default_factory=dict)
    day_rollover: int = 0
