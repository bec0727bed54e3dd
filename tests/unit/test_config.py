"""Tests for the config layer (defaults + settings)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from texttrim.config.defaults import (
    ALLOWED_TAGS_HOOK,
    DEFAULT_ALLOWED_TAGS,
    DEFAULT_MORE,
    DEFAULT_NUM_CHARS,
    DEFAULT_NUM_WORDS,
    TRIM_WORDS_RESULT_HOOK,
    VOID_ELEMENTS,
)
from texttrim.config.settings import Settings, get_settings


# ===================================================================
# defaults.py
# ===================================================================


class TestDefaults:
    """Verify built-in defaults have expected shape and content."""

    def test_allowed_tags(self) -> None:
        assert DEFAULT_ALLOWED_TAGS.split(" ") == [
            "p",
            "a",
            "span",
            "b",
            "i",
            "br",
            "blockquote",
        ]

    def test_limits(self) -> None:
        assert DEFAULT_NUM_WORDS == 55
        assert DEFAULT_NUM_CHARS == 60

    def test_more_is_ellipsis(self) -> None:
        assert DEFAULT_MORE == "…"

    def test_void_elements(self) -> None:
        assert VOID_ELEMENTS == ("br", "hr", "wbr")

    def test_hook_names(self) -> None:
        assert ALLOWED_TAGS_HOOK == "allowed_tags"
        assert TRIM_WORDS_RESULT_HOOK == "trim_words_result"


# ===================================================================
# settings.py
# ===================================================================


class TestSettingsDefaults:
    """Settings work with no environment at all."""

    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.word_count_type == "words"
        assert s.charset == "UTF-8"
        assert s.more == DEFAULT_MORE
        assert s.allowed_tags == DEFAULT_ALLOWED_TAGS
        assert s.num_words == 55
        assert s.num_chars == 60
        assert s.log_level == "INFO"


class TestSettingsFromEnv:
    """Test that Settings correctly loads from environment variables."""

    def test_loads_locale(self, settings: Settings) -> None:
        assert settings.word_count_type == "characters"
        assert settings.charset == "utf8"
        assert settings.more == " [...]"

    def test_normalizes_allowed_tags(self, settings: Settings) -> None:
        assert settings.allowed_tags == "p a strong"

    def test_loads_limits(self, settings: Settings) -> None:
        assert settings.num_words == 20
        assert settings.num_chars == 120

    def test_loads_log_level(self, settings: Settings) -> None:
        assert settings.log_level == "DEBUG"

    def test_empty_env_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXTTRIM_MORE", "")
        s = Settings(_env_file=None)
        assert s.more == DEFAULT_MORE

    def test_reads_dotenv_file(self, tmp_path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("TEXTTRIM_NUM_WORDS=7\n", encoding="utf-8")
        s = Settings(_env_file=env_file)
        assert s.num_words == 7


class TestSettingsValidation:
    """Invalid env values are rejected by pydantic."""

    def test_unknown_word_count_type(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXTTRIM_WORD_COUNT_TYPE", "syllables")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_negative_num_words(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXTTRIM_NUM_WORDS", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_word_count_type_case_insensitive(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEXTTRIM_WORD_COUNT_TYPE", "  Characters ")
        assert Settings(_env_file=None).word_count_type == "characters"


class TestGetSettings:
    """get_settings() singleton behaviour."""

    def test_returns_cached_instance(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("TEXTTRIM_NUM_CHARS", "99")
        get_settings.cache_clear()
        second = get_settings()
        assert second is not first
        assert second.num_chars == 99
