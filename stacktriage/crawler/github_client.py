"""GitHub API client for reading source files."""

import logging

from github import Auth, Github, GithubException
from rich.console import Console

console = Console()
logger = logging.getLogger(__name__)


class GitHubClient:
    """Client for interacting with GitHub API."""

    def __init__(self, token: str, repo: str | None = None):
        self.gh = Github(auth=Auth.Token(token))
        self.repo = repo

    def authenticate(self) -> bool:
        """Verify authentication and connection."""
        try:
            user = self.gh.get_user()
            console.print(f"[green]✓[/green] Connected to GitHub")
            console.print(f"  User: {user.login}")
            return True
        except GithubException as e:
            console.print(f"[red]✗[/red] Authentication failed: {e}")
            return False

    def get_file_content(
        self,
        repo_full_name: str | None,
        file_path: str,
        branch: str = "main",
    ) -> str | None:
        """Get raw file content, or None if it cannot be read."""
        repo_full_name = repo_full_name or self.repo
        try:
            repo = self.gh.get_repo(repo_full_name)
            content = repo.get_contents(file_path, ref=branch)
            return content.decoded_content.decode("utf-8")
        except GithubException as e:
            logger.warning(
                "Could not read %s@%s from %s: %s", file_path, branch, repo_full_name, e
            )
            return None
