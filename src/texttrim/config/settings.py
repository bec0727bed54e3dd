"""Pydantic-based settings loaded from environment variables.

Every field has a sensible default, so the library works without any
configuration. Values come from ``TEXTTRIM_*`` env vars or ``.env``.

Usage::

    from texttrim.config import get_settings
    settings = get_settings()
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from texttrim.config.defaults import (
    DEFAULT_ALLOWED_TAGS,
    DEFAULT_CHARSET,
    DEFAULT_MORE,
    DEFAULT_NUM_CHARS,
    DEFAULT_NUM_WORDS,
)


class Settings(BaseSettings):
    """Central configuration — every field maps to a TEXTTRIM_UPPER_SNAKE env var."""

    model_config = SettingsConfigDict(
        env_prefix="TEXTTRIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- Locale -------------------------------------------------------------
    word_count_type: Literal["words", "characters"] = "words"
    charset: str = DEFAULT_CHARSET
    more: str = DEFAULT_MORE

    # -- Trimming -----------------------------------------------------------
    allowed_tags: str = DEFAULT_ALLOWED_TAGS
    num_words: int = Field(default=DEFAULT_NUM_WORDS, ge=0)
    num_chars: int = Field(default=DEFAULT_NUM_CHARS, ge=0)

    # -- General ------------------------------------------------------------
    log_level: str = "INFO"

    @field_validator("word_count_type", mode="before")
    @classmethod
    def lower_word_count_type(cls, value: object) -> object:
        """Accept ``Characters`` / ``WORDS`` from env."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("allowed_tags", mode="before")
    @classmethod
    def normalize_allowed_tags(cls, value: object) -> object:
        """Collapse "p,  a\\tspan" style input to "p a span"."""
        if isinstance(value, str):
            return " ".join(value.replace(",", " ").lower().split())
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
