"""Minimal filesystem seam used by the script detector and launcher."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Protocol


class FileSystem(Protocol):
    """Operations the run tool needs from the host filesystem."""

    def cwd(self) -> Optional[Path]:
        ...

    def chdir(self, path: Path) -> None:
        ...

    def is_file(self, path: Path) -> bool:
        ...


class LocalFileSystem:
    """FileSystem backed by the process working directory and ``os``."""

    def cwd(self) -> Optional[Path]:
        """Return the working directory, or ``None`` if it no longer exists."""
        try:
            return Path(os.getcwd())
        except (FileNotFoundError, PermissionError):
            return None

    def chdir(self, path: Path) -> None:
        os.chdir(path)

    def is_file(self, path: Path) -> bool:
        return path.is_file()


__all__ = ["FileSystem", "LocalFileSystem"]
