"""Build trigger and the default command-line build collaborator."""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Protocol

from spmrun.errors import BuildFailure
from spmrun.graph.model import Product

logger = logging.getLogger(__name__)


class Builder(Protocol):
    """Compiles a named product so its artifact exists under the build path."""

    def build(self, product_name: str) -> None:
        ...

    def artifact_path(self, product_name: str) -> Path:
        ...


@dataclass(slots=True)
class CommandBuilderConfig:
    """Configuration for invoking the package build command."""

    package_root: Path
    command: str = "swift build --product"
    build_path: str = ".build/debug"
    timeout_sec: Optional[int] = None


class CommandBuilder:
    """Run the configured build command synchronously for one product."""

    def __init__(
        self, config: CommandBuilderConfig, *, env: Optional[Mapping[str, str]] = None
    ) -> None:
        self.config = config
        self._env = None if env is None else dict(env)

    @property
    def build_dir(self) -> Path:
        return (self.config.package_root / self.config.build_path).absolute()

    def artifact_path(self, product_name: str) -> Path:
        """Absolute path the product's executable is built to."""
        return self.build_dir / product_name

    def _build_command(self, product_name: str) -> list[str]:
        command = shlex.split(self.config.command)
        command.append(product_name)
        return command

    def build(self, product_name: str) -> None:
        """Build ``product_name``; raise :class:`BuildFailure` on any failure."""
        command = self._build_command(product_name)
        logger.info("Building product '%s': %s", product_name, shlex.join(command))

        started = time.perf_counter()
        try:
            completed = subprocess.run(
                command,
                cwd=str(self.config.package_root),
                env=self._env,
                timeout=self.config.timeout_sec,
                check=False,
            )
        except FileNotFoundError as exc:
            raise BuildFailure(product_name, output=f"build command not found: {command[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise BuildFailure(
                product_name,
                output=f"build timed out after {self.config.timeout_sec}s",
            ) from exc

        duration_ms = (time.perf_counter() - started) * 1000
        if completed.returncode != 0:
            raise BuildFailure(product_name, completed.returncode)
        logger.info("Built product '%s' in %.0fms", product_name, duration_ms)


def maybe_build(product: Product, should_build: bool, builder: Builder) -> None:
    """Build ``product`` unless building was disabled.

    Builder errors propagate unchanged.
    """
    if not should_build:
        logger.debug("Skipping build of '%s'", product.name)
        return
    builder.build(product.name)


__all__ = ["Builder", "CommandBuilder", "CommandBuilderConfig", "maybe_build"]
