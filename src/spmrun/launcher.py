"""Replace the current process with a built product or interpreter."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, NoReturn, Optional, Sequence

from spmrun.errors import LaunchFailure
from spmrun.filesystem import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

ExecFunction = Callable[[str, Sequence[str]], object]


@dataclass(frozen=True, slots=True)
class LaunchContext:
    """Working directory state captured before anything can change it."""

    original_working_directory: Path
    fs: FileSystem = field(default_factory=LocalFileSystem, compare=False)

    @classmethod
    def capture(cls, fs: Optional[FileSystem] = None) -> "LaunchContext":
        """Snapshot the working directory at process start."""
        fs = fs or LocalFileSystem()
        cwd = fs.cwd()
        if cwd is None:
            raise LaunchFailure(".", "current working directory is not accessible")
        return cls(original_working_directory=cwd, fs=fs)

    @property
    def current_working_directory(self) -> Optional[Path]:
        return self.fs.cwd()


class ProcessLauncher:
    """exec-style launcher: never returns, raises :class:`LaunchFailure` instead."""

    def __init__(self, exec_fn: Optional[ExecFunction] = None) -> None:
        self._exec = exec_fn or os.execv

    def restore_working_directory(self, context: LaunchContext) -> bool:
        """chdir back to the original directory if it drifted.

        Returns True when a directory change was made.
        """
        original = context.original_working_directory
        current = context.current_working_directory
        if current is not None and current == original:
            return False

        logger.debug("Restoring working directory %s (was %s)", original, current)
        try:
            context.fs.chdir(original)
        except OSError as exc:
            raise LaunchFailure(
                original, f"could not restore working directory: {exc.strerror or exc}"
            ) from exc
        return True

    def launch(
        self,
        executable_path: Path,
        arguments: Sequence[str],
        context: LaunchContext,
    ) -> NoReturn:
        """Replace this process with ``executable_path``.

        ``argv[0]`` is the executable path relative to the original working
        directory; ``arguments`` follow unchanged.
        """
        self.restore_working_directory(context)

        display_path = os.path.relpath(executable_path, context.original_working_directory)
        argv = [display_path, *arguments]
        logger.debug("exec %s argv=%s", executable_path, argv)

        sys.stdout.flush()
        sys.stderr.flush()
        try:
            self._exec(str(executable_path), argv)
        except OSError as exc:
            raise LaunchFailure(executable_path, exc.strerror or str(exc)) from exc
        raise LaunchFailure(executable_path, "exec returned without replacing the process")


__all__ = ["ExecFunction", "LaunchContext", "ProcessLauncher"]
