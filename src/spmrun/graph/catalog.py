"""Executable views over a package graph."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

from spmrun.graph.model import PackageGraph, Product, is_executable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Catalog:
    """Run candidates partitioned into explicit and implicit views.

    ``all_executables`` covers the whole graph and is searched when the user
    names a target. ``root_executables`` only covers root packages and is
    used for implicit deduction. Both keep graph order.
    """

    all_executables: tuple[Product, ...]
    root_executables: tuple[Product, ...]

    @classmethod
    def from_graph(cls, graph: PackageGraph) -> "Catalog":
        all_executables = tuple(p for p in graph.all_products if is_executable(p))
        root_executables = tuple(
            product
            for package in graph.root_packages
            for product in package.products
            if is_executable(product)
        )

        duplicates = sorted(
            name for name, count in Counter(p.name for p in all_executables).items() if count > 1
        )
        if duplicates:
            logger.warning(
                "Executable names declared by more than one package: %s "
                "(explicit lookup picks the first in graph order)",
                ", ".join(duplicates),
            )
        return cls(all_executables=all_executables, root_executables=root_executables)

    def find(self, name: str) -> Product | None:
        """Return the first executable named ``name`` in graph order."""
        for product in self.all_executables:
            if product.name == name:
                return product
        return None


__all__ = ["Catalog"]
