from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from spmrun.filesystem import LocalFileSystem
from spmrun.script import is_script_path, run_file_deprecated


@pytest.mark.parametrize("candidate", ["server", "main.py", "script.swift.bak", "swift", ""])
def test_rejects_candidates_without_suffix(
    candidate: str, make_fs: Callable[..., object], tmp_path: Path
) -> None:
    fs = make_fs(tmp_path, files=[tmp_path / candidate])

    assert is_script_path(candidate, fs) is False


def test_relative_candidate_is_joined_to_cwd(
    make_fs: Callable[..., object], tmp_path: Path
) -> None:
    fs = make_fs(tmp_path, files=[tmp_path / "./script.swift"])

    assert is_script_path("./script.swift", fs) is True


def test_absolute_candidate_ignores_cwd(make_fs: Callable[..., object], tmp_path: Path) -> None:
    script = tmp_path / "elsewhere" / "main.swift"
    fs = make_fs(None, files=[script])

    assert is_script_path(str(script), fs) is True


def test_missing_file_is_not_a_script(make_fs: Callable[..., object], tmp_path: Path) -> None:
    fs = make_fs(tmp_path)

    assert is_script_path("missing.swift", fs) is False


def test_unknown_cwd_fails_closed(make_fs: Callable[..., object], tmp_path: Path) -> None:
    fs = make_fs(None, files=[tmp_path / "script.swift"])

    assert is_script_path("script.swift", fs) is False


def test_directory_named_like_script_is_rejected(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "Sources.swift").mkdir()
    (tmp_path / "real.swift").write_text("print(1)\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    fs = LocalFileSystem()

    assert is_script_path("Sources.swift", fs) is False
    assert is_script_path("real.swift", fs) is True


def test_custom_suffix(make_fs: Callable[..., object], tmp_path: Path) -> None:
    fs = make_fs(tmp_path, files=[tmp_path / "tool.py", tmp_path / "tool.swift"])

    assert is_script_path("tool.py", fs, suffix=".py") is True
    assert is_script_path("tool.swift", fs, suffix=".py") is False


def test_deprecation_diagnostic_text() -> None:
    diagnostic = run_file_deprecated("swift run", "/usr/bin/swift")

    assert diagnostic.severity == "warning"
    assert diagnostic.id == "run-file-deprecated"
    assert str(diagnostic) == (
        "warning: 'swift run file.swift' command to interpret swift files is deprecated; "
        "use 'swift file.swift' instead"
    )
