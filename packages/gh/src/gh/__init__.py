"""GitHub API client utilities."""

from .client import GitHubClient
from .models import ContentsPutRequest

__all__ = ["GitHubClient", "ContentsPutRequest"]
