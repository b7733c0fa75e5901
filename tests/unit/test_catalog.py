from __future__ import annotations

import logging
from pathlib import Path

import pytest

from spmrun.graph.catalog import Catalog
from spmrun.graph.manifest import graph_from_mapping
from spmrun.graph.model import Product, is_executable


def test_catalog_partitions_root_and_graph_executables(tmp_path: Path) -> None:
    graph = graph_from_mapping(
        {
            "packages": [
                {
                    "name": "app",
                    "root": True,
                    "dependencies": ["dep"],
                    "products": [
                        {"name": "server", "type": "executable"},
                        {"name": "AppCore", "type": "library"},
                    ],
                },
                {
                    "name": "dep",
                    "products": [
                        {"name": "client", "type": "executable"},
                        {"name": "DepTests", "type": "test"},
                    ],
                },
            ]
        },
        tmp_path,
    )

    catalog = Catalog.from_graph(graph)

    assert [p.name for p in catalog.all_executables] == ["server", "client"]
    assert [p.name for p in catalog.root_executables] == ["server"]
    assert set(catalog.root_executables) <= set(catalog.all_executables)


def test_catalog_warns_about_duplicate_executable_names(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    graph = graph_from_mapping(
        {
            "packages": [
                {
                    "name": "app",
                    "root": True,
                    "dependencies": ["dep"],
                    "products": [{"name": "tool", "type": "executable"}],
                },
                {"name": "dep", "products": [{"name": "tool", "type": "executable"}]},
            ]
        },
        tmp_path,
    )

    with caplog.at_level(logging.WARNING, logger="spmrun.graph.catalog"):
        catalog = Catalog.from_graph(graph)

    assert "tool" in caplog.text
    found = catalog.find("tool")
    assert found is not None
    assert found.package == "app"


def test_is_executable_filters_by_product_type() -> None:
    assert is_executable(Product(name="a", type="executable", package="p"))
    assert not is_executable(Product(name="a", type="library", package="p"))
    assert not is_executable(Product(name="a", type="test", package="p"))
