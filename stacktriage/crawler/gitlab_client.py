"""GitLab API client for reading source files."""

import logging

import gitlab
from rich.console import Console

console = Console()
logger = logging.getLogger(__name__)


class GitLabClient:
    """Client for interacting with GitLab API."""
    
    def __init__(self, url: str, token: str, project: str | int | None = None):
        self.url = url
        self.gl = gitlab.Gitlab(url, private_token=token)
        self.project = project
        
    def authenticate(self) -> bool:
        """Verify authentication and connection."""
        try:
            self.gl.auth()
            console.print(f"[green]✓[/green] Connected to {self.url}")
            console.print(f"  User: {self.gl.user.username}")
            return True
        except gitlab.exceptions.GitlabAuthenticationError as e:
            console.print(f"[red]✗[/red] Authentication failed: {e}")
            return False
    
    def get_file_content(
        self,
        project_id: str | int | None,
        file_path: str,
        branch: str = "main",
    ) -> str | None:
        """Get raw file content, or None if it cannot be read."""
        project_id = project_id or self.project
        try:
            project = self.gl.projects.get(project_id)
            f = project.files.get(file_path=file_path, ref=branch)
            return f.decode().decode("utf-8")
        except gitlab.exceptions.GitlabGetError as e:
            logger.warning(
                "Could not read %s@%s from project %s: %s", file_path, branch, project_id, e
            )
            return None
