"""
PR Reviewer Assignment

Requests reviewers for the pull request that triggered the workflow.

FLOW:
1. Load the reviewer pool and quota (CONFIG_FILE or SHEET_NAME)
2. Resolve the PR from GITHUB_REPOSITORY / GITHUB_REF
3. Fetch the PR from the GitHub API
4. Skip missing, draft and WIP pull requests
5. Select reviewers per group for today's weekday
6. Request the selected reviewers on the PR (only if any were selected)

Environment Variables:
    GITHUB_TOKEN: Token allowed to request reviewers on the repository
    GITHUB_REPOSITORY: "owner/repo" (set by GitHub Actions)
    GITHUB_REF: "refs/pull/<number>/merge" (set by GitHub Actions)
    CONFIG_FILE: Path to a YAML config file
    SHEET_NAME / CREDENTIAL_FILE: Google Sheet config source
    DAY_ROLLOVER: Following days allowed to top up a short pool (default 0)

SCHEDULE:
- Runs on "pull_request" events (opened, ready_for_review, reopened)
"""

import asyncio
import os
import sys
import traceback
from datetime import date
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lib.config_loader import load_config  # noqa: E402
from lib.data_types import ExecutionContext, ReviewerConfig  # noqa: E402
from lib.github_client import GitHubAPI  # noqa: E402
from lib.selector import pick_reviewers_for_pull_request  # noqa: E402


async def assign_reviewers(
    api: GitHubAPI,
    context: ExecutionContext,
    config: ReviewerConfig,
    today: Optional[date] = None,
) -> List[str]:
    """
    Select and request reviewers for one pull request.

    Returns:
        The reviewer names that were requested (empty if none)
    """
    print(
        f"📋 Processing PR #{context.pr_number} in "
        f"{context.owner}/{context.repo}"
    )

    pr = await api.fetch_pull_request(context)
    reviewers = pick_reviewers_for_pull_request(config, pr, today=today)

    if not reviewers:
        print("ℹ️  No reviewers selected - nothing to request")
        return []

    result = await api.request_reviewers(context, reviewers)
    requested = [user["login"] for user in result.get("requested_reviewers", [])]
    print(f"✅ Requested reviewers: {reviewers}")
    print(f"   PR now awaiting review from: {sorted(requested)}")
    return reviewers


def main() -> None:
    token = os.environ.get("GITHUB_TOKEN", "").strip()
    if not token:
        raise ValueError("GITHUB_TOKEN environment variable is required")

    config = load_config()
    context = ExecutionContext.from_env()
    asyncio.run(assign_reviewers(GitHubAPI(token), context, config))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # noqa: BLE001
        print(f"\n❌ Error during reviewer assignment: {exc}")
        traceback.print_exc()
        raise  # Re-raise to ensure workflow fails
