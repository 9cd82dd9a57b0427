"""GitHub REST API client for the two calls a rotation run needs."""

from typing import Any, List, Optional

import httpx

from lib.data_types import ExecutionContext, PullRequest
from lib.env_constants import GITHUB_API_URL, GITHUB_API_VERSION


class GitHubAPI:
    """GitHub REST API client."""

    def __init__(
        self,
        token: str,
        base_url: str = GITHUB_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    async def fetch_pull_request(
        self, context: ExecutionContext
    ) -> Optional[PullRequest]:
        """Get a snapshot of the pull request, or None if it does not exist."""
        async with self._client() as client:
            response = await client.get(
                f"{self.base_url}/repos/{context.owner}/{context.repo}"
                f"/pulls/{context.pr_number}",
                headers=self._headers(),
            )

            if response.status_code == 404:
                return None

            response.raise_for_status()
            return PullRequest.from_api(response.json())

    async def request_reviewers(
        self, context: ExecutionContext, reviewers: List[str]
    ) -> dict[str, Any]:
        """Request reviews from the given users on the pull request."""
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/repos/{context.owner}/{context.repo}"
                f"/pulls/{context.pr_number}/requested_reviewers",
                headers=self._headers(),
                json={"reviewers": reviewers},
            )
            response.raise_for_status()
            return response.json()
