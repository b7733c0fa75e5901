"""Run request primitives shared by the CLI and the run tool."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(frozen=True, slots=True)
class RunIntent:
    """What the user asked to run.

    ``target_name`` is ``None`` when the executable should be deduced.
    ``arguments`` are forwarded verbatim to the launched program.
    """

    target_name: Optional[str] = None
    arguments: tuple[str, ...] = field(default_factory=tuple)
    should_build: bool = True

    @classmethod
    def from_positionals(cls, positionals: Sequence[str], *, should_build: bool = True) -> "RunIntent":
        """Split ``[executable, *arguments]`` as typed on the command line."""
        if not positionals:
            return cls(should_build=should_build)
        return cls(
            target_name=positionals[0],
            arguments=tuple(positionals[1:]),
            should_build=should_build,
        )


__all__ = ["RunIntent"]
