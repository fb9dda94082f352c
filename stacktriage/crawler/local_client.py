"""Read source files from a local checkout."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalClient:
    """Serves files from a directory; the branch is whatever is checked out."""

    def __init__(self, root: Path | str = "."):
        self.root = Path(root).expanduser()

    def authenticate(self) -> bool:
        return self.root.is_dir()

    def get_file_content(
        self,
        repo: str | None,
        file_path: str,
        branch: str = "main",
    ) -> str | None:
        """Get raw file content, or None if it cannot be read."""
        base = self.root / repo if repo else self.root
        path = base / file_path
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.warning("Could not read %s", path)
            return None
