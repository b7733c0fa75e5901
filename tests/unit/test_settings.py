from __future__ import annotations

import pytest
from pydantic import ValidationError

from spmrun.settings import RunSettings, get_run_settings


def test_settings_defaults() -> None:
    settings = get_run_settings()

    assert settings.MANIFEST_NAME == "package-graph.yaml"
    assert settings.BUILD_PATH == ".build/debug"
    assert settings.BUILD_COMMAND == "swift build --product"
    assert settings.SCRIPT_SUFFIX == ".swift"
    assert settings.INTERPRETER == "swift"
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.RUN_LOG_DIR is None


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPMRUN_BUILD_PATH", ".build/release")
    monkeypatch.setenv("SPMRUN_LOG_LEVEL", "debug")
    monkeypatch.setenv("SPMRUN_BUILD_TIMEOUT_SEC", "30")

    settings = get_run_settings()

    assert settings.BUILD_PATH == ".build/release"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.BUILD_TIMEOUT_SEC == 30


def test_settings_are_cached() -> None:
    assert get_run_settings() is get_run_settings()


def test_invalid_log_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPMRUN_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        RunSettings()


def test_script_suffix_requires_dot(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPMRUN_SCRIPT_SUFFIX", "swift")

    with pytest.raises(ValidationError):
        RunSettings()
