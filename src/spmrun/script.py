"""Detection of the deprecated ``run file.swift`` form."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from spmrun.filesystem import FileSystem

DEFAULT_SCRIPT_SUFFIX = ".swift"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """User-facing diagnostic emitted on the error channel."""

    id: str
    severity: Literal["warning", "error", "note"]
    message: str

    def __str__(self) -> str:
        return f"{self.severity}: {self.message}"


def run_file_deprecated(
    tool_name: str, interpreter: str, suffix: str = DEFAULT_SCRIPT_SUFFIX
) -> Diagnostic:
    """Build the warning shown when a script path is passed instead of a product."""
    language = suffix.lstrip(".")
    command = os.path.basename(interpreter)
    return Diagnostic(
        id="run-file-deprecated",
        severity="warning",
        message=(
            f"'{tool_name} file{suffix}' command to interpret {language} files is deprecated; "
            f"use '{command} file{suffix}' instead"
        ),
    )


def is_script_path(
    candidate: str, fs: FileSystem, suffix: str = DEFAULT_SCRIPT_SUFFIX
) -> bool:
    """Return True when ``candidate`` names an existing source file.

    Relative candidates are joined to the current working directory; when
    that directory cannot be determined the answer is False.
    """
    if not candidate.endswith(suffix):
        return False

    if os.path.isabs(candidate):
        path = Path(candidate)
    else:
        cwd = fs.cwd()
        if cwd is None:
            return False
        path = cwd / candidate
    return fs.is_file(path)


__all__ = ["DEFAULT_SCRIPT_SUFFIX", "Diagnostic", "is_script_path", "run_file_deprecated"]
