"""The run tool: script redirect, target resolution, build, launch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, NoReturn, Optional, Sequence

from spmrun.build import Builder, CommandBuilder, CommandBuilderConfig, maybe_build
from spmrun.errors import RunError
from spmrun.graph.catalog import Catalog
from spmrun.graph.manifest import load_package_graph
from spmrun.graph.model import PackageGraph, Product
from spmrun.intent import RunIntent
from spmrun.launcher import LaunchContext, ProcessLauncher
from spmrun.observability.logger import InvocationLogger
from spmrun.resolver import resolve
from spmrun.script import Diagnostic, is_script_path, run_file_deprecated
from spmrun.settings import RunSettings
from spmrun.toolchain import Toolchain

logger = logging.getLogger(__name__)

GraphLoader = Callable[[Path], PackageGraph]
DiagnosticHandler = Callable[[Diagnostic], None]


def _log_diagnostic(diagnostic: Diagnostic) -> None:
    logger.warning("%s", diagnostic.message)


class RunTool:
    """Carry one invocation from intent to process replacement."""

    def __init__(
        self,
        settings: RunSettings,
        context: LaunchContext,
        *,
        package_root: Optional[Path] = None,
        graph_loader: Optional[GraphLoader] = None,
        builder: Optional[Builder] = None,
        toolchain: Optional[Toolchain] = None,
        launcher: Optional[ProcessLauncher] = None,
        ledger: Optional[InvocationLogger] = None,
        on_diagnostic: Optional[DiagnosticHandler] = None,
    ) -> None:
        self.settings = settings
        self.context = context
        self.package_root = self._resolve_package_root(package_root)
        self._graph_loader = graph_loader or self._load_graph
        self.builder: Builder = builder or CommandBuilder(
            CommandBuilderConfig(
                package_root=self.package_root,
                command=settings.BUILD_COMMAND,
                build_path=settings.BUILD_PATH,
                timeout_sec=settings.BUILD_TIMEOUT_SEC,
            )
        )
        self.toolchain = toolchain or Toolchain(interpreter=settings.INTERPRETER)
        self.launcher = launcher or ProcessLauncher()
        self.ledger = ledger
        self._on_diagnostic = on_diagnostic or _log_diagnostic

    def _resolve_package_root(self, package_root: Optional[Path]) -> Path:
        if package_root is None and self.settings.PACKAGE_PATH:
            package_root = Path(self.settings.PACKAGE_PATH)
        if package_root is None:
            return self.context.original_working_directory
        if not package_root.is_absolute():
            package_root = self.context.original_working_directory / package_root
        return package_root

    def _load_graph(self, package_root: Path) -> PackageGraph:
        return load_package_graph(package_root, self.settings.MANIFEST_NAME)

    def _record(self, event: str, **data: object) -> None:
        if self.ledger is None:
            return
        try:
            self.ledger.log(event, dict(data))
        except OSError as exc:
            self._drop_ledger(exc)

    def _finalize(self, outcome: str, **details: object) -> None:
        if self.ledger is None:
            return
        try:
            self.ledger.finalize(outcome, **details)
        except OSError as exc:
            self._drop_ledger(exc)

    def _drop_ledger(self, exc: OSError) -> None:
        assert self.ledger is not None
        logger.warning("Disabling run log at %s: %s", self.ledger.run_dir, exc)
        self.ledger = None

    def run(self, intent: RunIntent) -> NoReturn:
        """Execute ``intent``; only returns by raising :class:`RunError`."""
        try:
            if intent.target_name is not None and is_script_path(
                intent.target_name, self.context.fs, self.settings.SCRIPT_SUFFIX
            ):
                self.run_script(intent.target_name, intent.arguments)

            product = self.find_product(intent)
            if intent.should_build:
                self._record("build_started", product=product.name)
            else:
                self._record("build_skipped", product=product.name)
            maybe_build(product, intent.should_build, self.builder)

            self._launch(self.builder.artifact_path(product.name), intent.arguments)
        except RunError as exc:
            self._record("failed", error=type(exc).__name__, message=str(exc))
            self._finalize("error", error=type(exc).__name__)
            raise

    def run_script(self, script: str, arguments: Sequence[str]) -> NoReturn:
        """Hand ``script`` to the toolchain interpreter instead of a product."""
        self._on_diagnostic(
            run_file_deprecated(
                self.settings.TOOL_NAME, self.settings.INTERPRETER, self.settings.SCRIPT_SUFFIX
            )
        )
        interpreter = self.toolchain.script_interpreter
        self._record("script_redirect", script=script, interpreter=str(interpreter))
        self._launch(interpreter, [script, *arguments])

    def find_product(self, intent: RunIntent) -> Product:
        """Load the graph and resolve the product ``intent`` refers to."""
        catalog = Catalog.from_graph(self._graph_loader(self.package_root))
        product = resolve(intent, catalog)
        logger.debug("Resolved product '%s' from package '%s'", product.name, product.package)
        self._record(
            "resolved",
            product=product.name,
            package=product.package,
            explicit=intent.target_name is not None,
        )
        return product

    def _launch(self, executable_path: Path, arguments: Sequence[str]) -> NoReturn:
        self._record("launch", executable=str(executable_path), arguments=list(arguments))
        self._finalize("exec", executable=executable_path)
        self.launcher.launch(executable_path, arguments, self.context)


__all__ = ["RunTool"]
