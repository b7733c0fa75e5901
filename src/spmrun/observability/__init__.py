"""Invocation ledger support."""

from __future__ import annotations

from spmrun.observability.logger import InvocationLogger

__all__ = ["InvocationLogger"]
