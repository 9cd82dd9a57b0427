"""Tests for the execution context and PR snapshot parsing"""

import os
from unittest.mock import patch

import pytest

from lib.data_types import ExecutionContext, PullRequest


class TestExecutionContext:
    """Test parsing the repository and PR number from the workflow env"""

    @pytest.mark.parametrize(
        "ref,expected",
        [
            ("refs/pull/42/merge", 42),
            ("refs/pull/7/head", 7),
            ("refs/pull/1000", 1000),
        ],
    )
    def test_from_strings(self, ref, expected):
        context = ExecutionContext.from_strings("octo/widgets", ref)
        assert context == ExecutionContext(owner="octo", repo="widgets", pr_number=expected)

    @pytest.mark.parametrize(
        "repository,ref,message",
        [
            ("", "refs/pull/1/merge", "owner/repo"),
            ("octo", "refs/pull/1/merge", "owner/repo"),
            ("octo/widgets", "refs/heads/main", "does not reference a pull request"),
            ("octo/widgets", "refs/pull/abc/merge", "Could not parse PR number"),
        ],
        ids=[
            "Missing repository",
            "Repository without name",
            "Branch ref",
            "Non-numeric PR number",
        ],
    )
    def test_invalid(self, repository, ref, message):
        with pytest.raises(ValueError, match=message):
            ExecutionContext.from_strings(repository, ref)

    @patch.dict(
        os.environ,
        {"GITHUB_REPOSITORY": "octo/widgets", "GITHUB_REF": "refs/pull/5/merge"},
    )
    def test_from_env(self):
        assert ExecutionContext.from_env() == ExecutionContext(
            owner="octo", repo="widgets", pr_number=5
        )


class TestPullRequestFromApi:
    def test_full_payload(self):
        pr = PullRequest.from_api(
            {
                "title": "Add feature",
                "draft": True,
                "user": {"login": "alice"},
                "requested_reviewers": [{"login": "bob"}, {"login": "carol"}],
            }
        )

        assert pr == PullRequest(
            author="alice",
            title="Add feature",
            requested_reviewers=("bob", "carol"),
            draft=True,
        )

    def test_minimal_payload(self):
        pr = PullRequest.from_api({"title": "Fix", "user": {"login": "alice"}})

        assert pr.requested_reviewers == ()
        assert pr.draft is False
