from __future__ import annotations

from pathlib import Path

import pytest

from classpath_scanner.config import (
    CLASS_PATH_ENV,
    FALLBACK_CLASS_PATH_ENV,
    ScannerSettings,
    split_class_path,
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # setenv first so the variables are restored (removed) after the test,
    # including any value a .env file writes into os.environ.
    for name in (CLASS_PATH_ENV, FALLBACK_CLASS_PATH_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_split_keeps_order_and_duplicates():
    assert split_class_path("b:a:b", ":") == [Path("b"), Path("a"), Path("b")]


def test_split_drops_empty_segments():
    assert split_class_path(";lib/a.jar;;classes;", ";") == [Path("lib/a.jar"), Path("classes")]


@pytest.mark.parametrize("value", [None, ""])
def test_split_empty_value(value):
    assert split_class_path(value) == []


def test_from_env_prefers_scanner_variable(clean_env: pytest.MonkeyPatch):
    clean_env.setenv(CLASS_PATH_ENV, "primary")
    clean_env.setenv(FALLBACK_CLASS_PATH_ENV, "fallback")

    settings = ScannerSettings.from_env(load_env_file=False)

    assert settings.class_path == "primary"


def test_from_env_falls_back_to_classpath(clean_env: pytest.MonkeyPatch):
    clean_env.setenv(FALLBACK_CLASS_PATH_ENV, "fallback")

    settings = ScannerSettings.from_env(load_env_file=False)

    assert settings.roots() == [Path("fallback")]


def test_from_env_without_values(clean_env: pytest.MonkeyPatch):
    settings = ScannerSettings.from_env(load_env_file=False)

    assert settings.class_path is None
    assert settings.roots() == []


def test_from_env_reads_env_file(tmp_path: Path, clean_env: pytest.MonkeyPatch):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{CLASS_PATH_ENV}=from-file\n")

    settings = ScannerSettings.from_env(env_file=env_file)

    assert settings.class_path == "from-file"


def test_from_env_empty_scanner_variable_does_not_fall_back(clean_env: pytest.MonkeyPatch):
    clean_env.setenv(CLASS_PATH_ENV, "")
    clean_env.setenv(FALLBACK_CLASS_PATH_ENV, "fallback")

    settings = ScannerSettings.from_env(load_env_file=False)

    assert settings.class_path == ""
    assert settings.roots() == []
