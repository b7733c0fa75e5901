"""Pick the single executable product a run invocation refers to."""

from __future__ import annotations

from spmrun.errors import ExecutableNotFound, MultipleExecutables, NoExecutableFound
from spmrun.graph.catalog import Catalog
from spmrun.graph.model import Product
from spmrun.intent import RunIntent


def resolve(intent: RunIntent, catalog: Catalog) -> Product:
    """Return the product to run.

    A named target is searched across the whole graph. Without a name the
    root packages must declare exactly one executable.

    Raises:
        ExecutableNotFound: the named target matches no executable.
        NoExecutableFound: no name given and no root executable exists.
        MultipleExecutables: no name given and several root executables exist.
    """
    if intent.target_name is not None:
        product = catalog.find(intent.target_name)
        if product is None:
            raise ExecutableNotFound(intent.target_name)
        return product

    candidates = catalog.root_executables
    if not candidates:
        raise NoExecutableFound()
    if len(candidates) > 1:
        raise MultipleExecutables([product.name for product in candidates])
    return candidates[0]


__all__ = ["resolve"]
