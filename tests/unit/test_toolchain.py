from __future__ import annotations

import os
from pathlib import Path

import pytest

from spmrun.errors import InterpreterNotFound
from spmrun.toolchain import Toolchain


def _make_binary(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    path.chmod(0o755)
    return path


def test_interpreter_looked_up_on_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    binary = _make_binary(tmp_path / "bin" / "swift")
    monkeypatch.setenv("PATH", str(binary.parent))

    assert Toolchain(interpreter="swift").script_interpreter == binary


def test_absolute_interpreter_is_used_directly(tmp_path: Path) -> None:
    binary = _make_binary(tmp_path / "toolchain" / "usr" / "bin" / "swift")

    assert Toolchain(interpreter=str(binary)).script_interpreter == binary


def test_missing_interpreter_raises(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PATH", str(tmp_path))

    with pytest.raises(InterpreterNotFound, match="'swift'"):
        Toolchain(interpreter="swift").script_interpreter


def test_non_executable_absolute_interpreter_raises(tmp_path: Path) -> None:
    path = tmp_path / "swift"
    path.write_text("", encoding="utf-8")
    os.chmod(path, 0o644)

    with pytest.raises(InterpreterNotFound):
        Toolchain(interpreter=str(path)).script_interpreter
