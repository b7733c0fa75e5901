"""
Package graph loader.

Reads the YAML manifest at ``<package root>/package-graph.yaml``, validates
it and produces a :class:`PackageGraph` restricted to the packages reachable
from the root packages.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from spmrun.errors import ManifestError
from spmrun.graph.model import Package, PackageGraph, Product, ProductType

logger = logging.getLogger(__name__)


class ProductManifest(BaseModel):
    """Product entry as declared in the manifest."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Product name, unique within its package")
    type: ProductType = Field(..., description="Product kind (executable|library|test)")


class PackageManifest(BaseModel):
    """Package entry as declared in the manifest."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Package name, unique within the graph")
    root: bool = Field(default=False, description="Whether the user owns this package directly")
    path: str = Field(default=".", description="Package directory relative to the package root")
    dependencies: List[str] = Field(
        default_factory=list, description="Names of packages this package depends on"
    )
    products: List[ProductManifest] = Field(
        default_factory=list, description="Products in declaration order"
    )


class GraphManifest(BaseModel):
    """Top-level manifest document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    packages: List[PackageManifest] = Field(..., description="All known packages")


def read_manifest(path: Path) -> GraphManifest:
    """Parse and validate a manifest file.

    Raises:
        ManifestError: If the file is missing, not YAML, or fails validation.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise ManifestError(f"package manifest not found at {path}") from exc
    except yaml.YAMLError as exc:
        raise ManifestError(f"invalid YAML in {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ManifestError(f"package manifest at {path} must be a mapping")

    try:
        return GraphManifest.model_validate(raw)
    except ValidationError as exc:
        raise ManifestError(f"invalid package manifest at {path}: {exc}") from exc


def build_graph(manifest: GraphManifest, package_root: Path) -> PackageGraph:
    """Resolve a validated manifest into a :class:`PackageGraph`."""
    by_name: Dict[str, PackageManifest] = {}
    for entry in manifest.packages:
        if entry.name in by_name:
            raise ManifestError(f"duplicate package '{entry.name}' in manifest")
        by_name[entry.name] = entry

    for entry in manifest.packages:
        for dependency in entry.dependencies:
            if dependency not in by_name:
                raise ManifestError(
                    f"package '{entry.name}' depends on unknown package '{dependency}'"
                )

    roots = [entry for entry in manifest.packages if entry.root]
    if not roots:
        raise ManifestError("package manifest declares no root package")

    checked: set[str] = set()

    def check_cycles(name: str, ancestry: tuple[str, ...]) -> None:
        if name in ancestry:
            cycle = " -> ".join(ancestry + (name,))
            raise ManifestError(f"Circular dependency detected: {cycle}")
        if name in checked:
            return
        for dependency in by_name[name].dependencies:
            check_cycles(dependency, ancestry + (name,))
        checked.add(name)

    for root in roots:
        check_cycles(root.name, ())

    # Roots lead in manifest order; dependencies follow depth-first.
    ordered: List[str] = [root.name for root in roots]
    visited: set[str] = set(ordered)

    def visit(name: str) -> None:
        for dependency in by_name[name].dependencies:
            if dependency not in visited:
                visited.add(dependency)
                ordered.append(dependency)
                visit(dependency)

    for root in roots:
        visit(root.name)

    packages = tuple(_to_package(by_name[name], package_root) for name in ordered)
    root_packages = tuple(package for package in packages if package.is_root)
    logger.debug(
        "Loaded package graph: roots=%s packages=%s",
        [package.name for package in root_packages],
        [package.name for package in packages],
    )
    return PackageGraph(root_packages=root_packages, packages=packages)


def _to_package(entry: PackageManifest, package_root: Path) -> Package:
    products = tuple(
        Product(name=product.name, type=product.type, package=entry.name)
        for product in entry.products
    )
    return Package(
        name=entry.name,
        path=(package_root / entry.path).resolve(),
        products=products,
        dependencies=tuple(entry.dependencies),
        is_root=entry.root,
    )


def load_package_graph(
    package_root: Path, manifest_name: Optional[str] = None
) -> PackageGraph:
    """Load the package graph rooted at ``package_root``."""
    path = package_root / (manifest_name or "package-graph.yaml")
    return build_graph(read_manifest(path), package_root)


def graph_from_mapping(data: Dict[str, Any], package_root: Path) -> PackageGraph:
    """Build a graph from an already-parsed manifest mapping."""
    try:
        manifest = GraphManifest.model_validate(data)
    except ValidationError as exc:
        raise ManifestError(f"invalid package manifest: {exc}") from exc
    return build_graph(manifest, package_root)


__all__ = [
    "GraphManifest",
    "PackageManifest",
    "ProductManifest",
    "build_graph",
    "graph_from_mapping",
    "load_package_graph",
    "read_manifest",
]
