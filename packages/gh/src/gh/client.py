"""GitHub API client."""

import logging
from typing import Any

import httpx


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0  # seconds


class GitHubClient:
    """GitHub REST API client authenticating with basic auth."""

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        username: str,
        token: str,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            username: GitHub username, used for basic auth
            token: GitHub personal access token, used as the basic auth password
            base_url: Custom base URL (defaults to GitHub API)
            timeout: Request timeout in seconds
            transport: Custom httpx transport (mainly for tests)
        """
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout
        self.transport = transport
        self.auth = httpx.BasicAuth(username, token)
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "blog-tool",
        }
        if not token:
            logger.warning("GitHub client initialized without token")
        logger.debug("GitHub client ready, base_url=%s, user=%s", self.base_url, username)

    def _request(
        self, method: str, endpoint: str, **kwargs: Any
    ) -> httpx.Response:
        """Make a single HTTP request to the GitHub API.

        The response is returned whatever its status; transport errors propagate.
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug("Request: %s %s", method, url)
        with httpx.Client(
            timeout=self.timeout,
            headers=self.headers,
            auth=self.auth,
            transport=self.transport,
        ) as client:
            response = client.request(method, url, **kwargs)
        logger.debug(
            "Response: %s %s (status=%d)",
            method,
            endpoint,
            response.status_code,
        )
        return response

    @staticmethod
    def contents_endpoint(owner: str, repo: str, path: str) -> str:
        """Contents API endpoint; ``path`` is appended verbatim."""
        return f"/repos/{owner}/{repo}/contents{path}"

    def contents_url(self, owner: str, repo: str, path: str) -> str:
        """Absolute Contents API URL for ``path``."""
        return f"{self.base_url}{self.contents_endpoint(owner, repo, path)}"

    def put_contents(
        self, owner: str, repo: str, path: str, body: str
    ) -> httpx.Response:
        """
        Create or update a file in a repository.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Remote file path, appended verbatim to the contents endpoint
            body: Serialized ContentsPutRequest

        Returns:
            The raw response; status codes are left to the caller
        """
        logger.info("Putting contents: %s/%s path=%s", owner, repo, path)
        return self._request(
            "PUT",
            self.contents_endpoint(owner, repo, path),
            content=body.encode("utf-8"),
        )
