"""Locate auxiliary toolchain binaries."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from spmrun.errors import InterpreterNotFound


@dataclass(slots=True)
class Toolchain:
    """Toolchain binaries resolved against ``PATH``."""

    interpreter: str = "swift"

    @property
    def script_interpreter(self) -> Path:
        """Absolute path of the script interpreter."""
        if os.path.isabs(self.interpreter):
            path = Path(self.interpreter)
            if not os.access(path, os.X_OK) or not path.is_file():
                raise InterpreterNotFound(self.interpreter)
            return path

        found = shutil.which(self.interpreter)
        if found is None:
            raise InterpreterNotFound(self.interpreter)
        return Path(os.path.abspath(found))


__all__ = ["Toolchain"]
