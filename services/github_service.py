import logging
from typing import Any, Optional

import httpx

from core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

REPO_SORT_OPTIONS = ("created", "updated", "pushed", "full_name")


class GitHubAPIError(Exception):
    """Upstream call failed. Carries the status code when one was received."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubService:
    """Thin read-only proxy over the GitHub REST API.

    Each call opens its own client; there is no caching and no retry, so a
    failed upstream request is reported once to the caller.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or default_settings
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.settings.GITHUB_USER_AGENT,
        }
        if self.settings.GITHUB_TOKEN:
            headers["Authorization"] = f"Bearer {self.settings.GITHUB_TOKEN}"
        return headers

    def build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.GITHUB_API_URL,
            headers=self._headers(),
            timeout=httpx.Timeout(self.settings.GITHUB_TIMEOUT_SECONDS),
            transport=self._transport,
        )

    async def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        async with self.build_client() as client:
            try:
                response = await client.get(path, params=params)
            except httpx.TimeoutException as e:
                logger.error(f"GitHub API timeout for {path}")
                raise GitHubAPIError(f"GitHub API timeout: {path}") from e
            except httpx.HTTPError as e:
                logger.error(f"GitHub API request failed for {path}: {e}")
                raise GitHubAPIError(f"GitHub API request failed: {path}") from e

        if not response.is_success:
            logger.warning(f"GitHub API error {response.status_code} for {path}")
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"GitHub API returned invalid JSON for {path}")
            raise GitHubAPIError(f"GitHub API returned invalid JSON: {path}") from e

    async def get_user(self, username: str) -> dict[str, Any]:
        return await self._get_json(f"/users/{username}")

    async def get_repos(
        self,
        username: str,
        sort: str = "updated",
        per_page: int = 100,
    ) -> list[dict[str, Any]]:
        return await self._get_json(
            f"/users/{username}/repos",
            params={"sort": sort, "per_page": per_page},
        )
