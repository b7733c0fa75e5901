"""Package graph primitives consumed by the run-target catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

ProductType = Literal["executable", "library", "test"]


@dataclass(frozen=True, slots=True)
class Product:
    """A named artifact declared by a package."""

    name: str
    type: ProductType
    package: str


@dataclass(frozen=True, slots=True)
class Package:
    """A package node with its declared products and direct dependencies."""

    name: str
    path: Path
    products: tuple[Product, ...] = ()
    dependencies: tuple[str, ...] = ()
    is_root: bool = False


@dataclass(frozen=True, slots=True)
class PackageGraph:
    """Loaded package graph.

    ``packages`` holds every package reachable from the roots, root packages
    first (manifest order) followed by dependencies in depth-first discovery
    order. Product iteration order derives from it and is stable.
    """

    root_packages: tuple[Package, ...]
    packages: tuple[Package, ...] = field(default=())

    @property
    def all_products(self) -> tuple[Product, ...]:
        return tuple(product for package in self.packages for product in package.products)


def is_executable(product: Product) -> bool:
    """Return True when ``product`` can be launched."""
    return product.type == "executable"


__all__ = ["Package", "PackageGraph", "Product", "ProductType", "is_executable"]
