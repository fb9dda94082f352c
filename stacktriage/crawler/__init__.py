"""Clients that fetch raw source files."""

from .gitlab_client import GitLabClient
from .github_client import GitHubClient
from .local_client import LocalClient

__all__ = ["GitLabClient", "GitHubClient", "LocalClient"]
