"""Excerpt trimming by word count or display width."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Literal

from texttrim.config.defaults import (
    ALLOWED_TAGS_HOOK,
    DEFAULT_NUM_CHARS,
    DEFAULT_NUM_WORDS,
    TRIM_WORDS_RESULT_HOOK,
)
from texttrim.config.settings import get_settings
from texttrim.core.errors import InvalidArgumentError
from texttrim.core.hooks import NullHooks
from texttrim.core.locale import SettingsLocale
from texttrim.core.tag_balancer import close_tags
from texttrim.utils.text_utils import (
    build_allowed_tags,
    strimwidth,
    strip_all_tags,
    strip_tags,
)

if TYPE_CHECKING:
    from texttrim.core.hooks import Hooks
    from texttrim.core.locale import Locale

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"[\n\r\t ]+")
_LEADING_WHITESPACE = "\n\r\t "


def trim_words(
    text: str,
    num_words: int = DEFAULT_NUM_WORDS,
    more: str | Literal[False] | None = None,
    allowed_tags: str | None = None,
    *,
    hooks: Hooks | None = None,
    locale: Locale | None = None,
) -> str:
    """
    Trim *text* to *num_words* words, keeping *allowed_tags* and closing them.

    In character-counting locales (with UTF-8 content) every character counts
    as a unit instead of every word.

    *more* is appended when text was cut: ``None`` uses the locale's default
    marker, ``False`` or ``""`` appends nothing.

    *allowed_tags* defaults to the configured whitelist
    (``TEXTTRIM_ALLOWED_TAGS``, ``p a span b i br blockquote`` out of the box).

    Filters run in this order: ``allowed_tags`` on the tag list, then
    ``trim_words_result`` on the final string with
    ``(num_words, more, original_text)`` as extra arguments.
    """
    _require_str(text, "text")
    num_words = _clamp_limit(num_words, "num_words")
    hooks = hooks if hooks is not None else NullHooks()
    locale = locale if locale is not None else _default_locale()
    more = _resolve_more(more, locale)
    original_text = text
    if allowed_tags is None:
        allowed_tags = get_settings().allowed_tags

    allowed_tags = hooks.apply_filter(ALLOWED_TAGS_HOOK, allowed_tags)
    text = strip_tags(text, build_allowed_tags(allowed_tags))

    if locale.uses_character_counting() and locale.is_utf8():
        units = _split_characters(text, num_words + 1)
        sep = ""
    else:
        units = _split_words(text, num_words + 1)
        sep = " "
    logger.debug("Counted %d unit(s), limit %d", len(units), num_words)

    if len(units) > num_words:
        units.pop()
        text = sep.join(units) + more
    else:
        text = sep.join(units)

    text = close_tags(text)
    return hooks.apply_filter(
        TRIM_WORDS_RESULT_HOOK, text, num_words, more, original_text
    )


def trim_characters(
    text: str,
    num_chars: int = DEFAULT_NUM_CHARS,
    more: str | Literal[False] | None = None,
    *,
    locale: Locale | None = None,
) -> str:
    """Strip all tags and trim to *num_chars* display columns, marker included.

    Unlike ``trim_words`` every excerpt takes the same width.
    """
    _require_str(text, "text")
    num_chars = _clamp_limit(num_chars, "num_chars")
    locale = locale if locale is not None else _default_locale()
    more = _resolve_more(more, locale)

    return strimwidth(strip_all_tags(text), num_chars, more)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _split_words(text: str, limit: int) -> list[str]:
    """Split on whitespace runs into at most *limit* non-empty pieces.

    The last piece keeps the unsplit remainder of the text.
    """
    if limit <= 1:
        return [text] if text else []
    text = text.lstrip(_LEADING_WHITESPACE)
    if not text:
        return []
    return [piece for piece in _WHITESPACE.split(text, maxsplit=limit - 1) if piece]


def _split_characters(text: str, limit: int) -> list[str]:
    text = _WHITESPACE.sub(" ", text).strip(" ")
    return list(text[:limit])


def _resolve_more(more: str | Literal[False] | None, locale: Locale) -> str:
    if more is None:
        return locale.default_more()
    return more or ""


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{name} must be str, got {type(value).__name__}"
        )


def _clamp_limit(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be int, got {type(value).__name__}"
        )
    if value < 0:
        logger.warning("Negative %s (%d) clamped to 0", name, value)
        return 0
    return value


def _default_locale() -> Locale:
    return SettingsLocale.from_settings(get_settings())
