"""Locale capability — default marker and word-counting mode."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from texttrim.config.defaults import (
    DEFAULT_CHARSET,
    DEFAULT_MORE,
    WORD_COUNT_CHARACTERS,
    WORD_COUNT_WORDS,
)

if TYPE_CHECKING:
    from texttrim.config.settings import Settings

_UTF8_CHARSET = re.compile(r"^utf-?8$", re.IGNORECASE)


class Locale(Protocol):
    """Protocol for locale providers consulted by the truncator."""

    def default_more(self) -> str:
        """Translated continuation marker used when the caller passes None."""
        ...

    def uses_character_counting(self) -> bool:
        """True if the locale counts single characters instead of words."""
        ...

    def is_utf8(self) -> bool:
        """True if content is UTF-8 encoded."""
        ...


@dataclass(frozen=True)
class SettingsLocale:
    """Locale backed by plain configuration values."""

    word_count_type: str = WORD_COUNT_WORDS
    charset: str = DEFAULT_CHARSET
    more: str = DEFAULT_MORE

    @classmethod
    def from_settings(cls, settings: Settings) -> SettingsLocale:
        return cls(
            word_count_type=settings.word_count_type,
            charset=settings.charset,
            more=settings.more,
        )

    def default_more(self) -> str:
        return self.more

    def uses_character_counting(self) -> bool:
        return self.word_count_type == WORD_COUNT_CHARACTERS

    def is_utf8(self) -> bool:
        return _UTF8_CHARSET.match(self.charset or "") is not None
