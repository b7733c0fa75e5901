"""spmrun: resolve, build and exec a package's executable product."""

from __future__ import annotations

from spmrun.errors import (
    BuildFailure,
    ExecutableNotFound,
    LaunchFailure,
    MultipleExecutables,
    NoExecutableFound,
    RunError,
)
from spmrun.intent import RunIntent

__version__: str = "0.1.0"

__all__ = [
    "BuildFailure",
    "ExecutableNotFound",
    "LaunchFailure",
    "MultipleExecutables",
    "NoExecutableFound",
    "RunError",
    "RunIntent",
    "__version__",
]
