"""Shared pytest fixtures for texttrim tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from texttrim.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Keep real ``TEXTTRIM_*`` env vars and ``.env`` files out of every test.

    Clears the ``get_settings`` LRU cache before and after the test so
    singleton state never leaks between tests.
    """
    for key in list(os.environ):
        if key.upper().startswith("TEXTTRIM_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set a full set of env vars and return them as a dict."""
    values: dict[str, str] = {
        # Locale
        "TEXTTRIM_WORD_COUNT_TYPE": "characters",
        "TEXTTRIM_CHARSET": "utf8",
        "TEXTTRIM_MORE": " [...]",
        # Trimming
        "TEXTTRIM_ALLOWED_TAGS": "p, a  STRONG",
        "TEXTTRIM_NUM_WORDS": "20",
        "TEXTTRIM_NUM_CHARS": "120",
        # General
        "TEXTTRIM_LOG_LEVEL": "DEBUG",
    }
    for key, val in values.items():
        monkeypatch.setenv(key, val)
    return values


@pytest.fixture()
def settings(env_vars: dict[str, str]) -> Settings:
    """Return a fresh ``Settings`` loaded from mocked env vars."""
    return Settings(_env_file=None)
