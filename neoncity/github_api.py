"""GitHub REST API client."""

import httpx
import logging
from typing import Optional, Any

logger = logging.getLogger(__name__)


class GitHubAPI:
    """Minimal client for the public GitHub REST API."""

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: The API base URL
            timeout: Request timeout in seconds (httpx default when None)
            transport: Optional transport override, used to stub the upstream
        """
        self.base_url = base_url.rstrip("/")

        client_kwargs = {"headers": self._get_headers(), "follow_redirects": True}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def _get_headers(self) -> dict:
        """Get headers for API requests."""
        return {
            "accept": "application/vnd.github+json",
            "user-agent": "neoncity-api",
        }

    def list_user_repos(self, username: str) -> Any:
        """
        List public repositories of a user, most recently updated first.

        Returns the decoded JSON body as-is, or an empty list when the body is
        empty. Redirects (renamed accounts) are followed. Raises
        httpx.HTTPStatusError on non-2xx responses and ValueError on a
        malformed body.
        """
        url = f"{self.base_url}/users/{username}/repos"
        params = {"sort": "updated", "direction": "desc"}

        response = self._client.get(url, params=params)
        response.raise_for_status()

        if not response.content:
            logger.debug(f"Empty repository listing body for {username}")
            return []

        data = response.json()
        logger.debug(f"Fetched repositories for {username}: {len(data) if isinstance(data, list) else 'non-list body'}")
        return data

    def close(self):
        """Close the HTTP client."""
        self._client.close()
