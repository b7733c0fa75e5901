"""Error hierarchy raised by the run tool.

Every failure that ends an invocation derives from :class:`RunError`; the
CLI prints ``str(exc)`` and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class RunError(Exception):
    """Base class for terminal run-tool failures."""


class NoExecutableFound(RunError):
    """The root packages declare no executable product."""

    def __init__(self) -> None:
        super().__init__("no executable product available")


class ExecutableNotFound(RunError):
    """No executable product with the requested name exists in the graph."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"no executable product named '{name}'")


class MultipleExecutables(RunError):
    """Implicit resolution found more than one root executable."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = list(names)
        super().__init__(
            f"multiple executable products available: {', '.join(self.names)}"
        )


class BuildFailure(RunError):
    """The build collaborator could not produce the product."""

    def __init__(self, product: str, returncode: int | None = None, output: str = "") -> None:
        self.product = product
        self.returncode = returncode
        self.output = output
        message = f"building '{product}' failed"
        if returncode is not None:
            message = f"{message} (exit code {returncode})"
        if output.strip():
            message = f"{message}\n{output.rstrip()}"
        super().__init__(message)


class LaunchFailure(RunError):
    """The process image could not be replaced with the target."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"could not launch '{path}': {reason}")


class InterpreterNotFound(RunError):
    """The toolchain has no usable script interpreter."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"script interpreter '{name}' not found in PATH")


class ManifestError(RunError):
    """The package graph manifest is missing or invalid."""


__all__ = [
    "BuildFailure",
    "ExecutableNotFound",
    "InterpreterNotFound",
    "LaunchFailure",
    "ManifestError",
    "MultipleExecutables",
    "NoExecutableFound",
    "RunError",
]
