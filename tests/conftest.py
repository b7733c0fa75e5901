"""Pytest configuration helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

import pytest


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear cached settings and SPMRUN_* overrides between tests."""
    from spmrun import settings

    for key in list(os.environ):
        if key.startswith("SPMRUN_"):
            monkeypatch.delenv(key, raising=False)

    settings.get_run_settings.cache_clear()
    try:
        yield
    finally:
        settings.get_run_settings.cache_clear()


class FakeFileSystem:
    """In-memory FileSystem recording chdir calls."""

    def __init__(self, cwd: Optional[Path], files: Iterable[Path] = ()) -> None:
        self.current: Optional[Path] = cwd
        self.files = {Path(path) for path in files}
        self.chdir_calls: list[Path] = []

    def cwd(self) -> Optional[Path]:
        return self.current

    def chdir(self, path: Path) -> None:
        self.chdir_calls.append(path)
        self.current = path

    def is_file(self, path: Path) -> bool:
        return path in self.files


@pytest.fixture()
def make_fs() -> Callable[..., FakeFileSystem]:
    """Return a factory for in-memory filesystems."""
    return FakeFileSystem
