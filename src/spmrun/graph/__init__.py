"""Package graph model, manifest loader and executable catalog."""

from __future__ import annotations

from spmrun.graph.catalog import Catalog
from spmrun.graph.manifest import load_package_graph
from spmrun.graph.model import Package, PackageGraph, Product, ProductType, is_executable

__all__ = [
    "Catalog",
    "Package",
    "PackageGraph",
    "Product",
    "ProductType",
    "is_executable",
    "load_package_graph",
]
