"""Local file I/O utilities."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalCacheStore:
    """Filesystem-backed store for cache files.

    Components receive a store instance instead of touching the filesystem
    directly, so any object with the same five methods can stand in for it.
    """

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 file. Raises FileNotFoundError if it does not exist."""
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 file, replacing any existing content."""
        Path(path).write_text(content, encoding="utf-8")

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def remove(self, path: Path, force: bool = False) -> None:
        """Remove a file.

        Args:
            path: Target to remove.
            force: If True, a missing target is not an error.
        """
        target = Path(path)
        if not target.exists():
            if force:
                return
            raise FileNotFoundError(f"No such file: {target}")

        target.unlink()
        logger.debug("Removed %s", target)

    def make_directory(self, path: Path, recursive: bool = False) -> None:
        """Create a directory. With recursive=True, parents are created and an existing directory is fine."""
        Path(path).mkdir(parents=recursive, exist_ok=recursive)
