"""Pure text manipulation utilities.

Tag stripping, display-width truncation, whole-element removal and
prefix/suffix checks. No external dependencies — stdlib only.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)

# Pre-compiled patterns for strip_tags / strip_all_tags
_COMMENT = re.compile(r"<!--.*?(?:-->|$)", re.DOTALL)
_MARKUP_DECLARATION = re.compile(r"<[!?][^>]*>?")
_TAG = re.compile(r"</?([a-zA-Z][a-zA-Z0-9]*)\b[^>]*>")
_UNTERMINATED_TAG = re.compile(r"<[a-zA-Z/][^>]*$")
_SCRIPT_STYLE = re.compile(
    r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL
)
_BREAKS = re.compile(r"[\r\n\t ]+")
_TAG_NAME = re.compile(r"^[a-zA-Z]+$")


def build_allowed_tags(names: str) -> tuple[str, ...]:
    """Turn a whitespace-separated tag list into an ordered, lowercase tuple.

    Duplicates are dropped; names that are not purely alphabetic are ignored.
    """
    if not names or not isinstance(names, str):
        return ()
    seen: set[str] = set()
    result: list[str] = []
    for raw in names.split():
        if not _TAG_NAME.match(raw):
            logger.debug("Ignoring invalid allowed tag name: %r", raw)
            continue
        name = raw.lower()
        if name not in seen:
            seen.add(name)
            result.append(name)
    return tuple(result)


def strip_tags(text: str, allowed: Iterable[str] = ()) -> str:
    """Remove HTML tags from *text*, keeping those named in *allowed* verbatim.

    Comments, doctype declarations and processing instructions are always
    removed. A tag left unterminated at the end of the text is dropped.
    Matching against *allowed* is case-insensitive.
    """
    if not text or not isinstance(text, str):
        return ""

    keep = frozenset(name.lower() for name in allowed)

    def _replace(match: re.Match[str]) -> str:
        return match.group(0) if match.group(1).lower() in keep else ""

    result = _COMMENT.sub("", text)
    result = _MARKUP_DECLARATION.sub("", result)
    result = _TAG.sub(_replace, result)
    return _UNTERMINATED_TAG.sub("", result)


def strip_all_tags(text: str, remove_breaks: bool = False) -> str:
    """Strip every tag, including ``<script>``/``<style>`` and their content.

    With *remove_breaks*, runs of line breaks and whitespace become one space.
    """
    if not text or not isinstance(text, str):
        return ""

    result = _SCRIPT_STYLE.sub("", text)
    result = strip_tags(result)
    if remove_breaks:
        result = _BREAKS.sub(" ", result)
    return result.strip()


def _char_width(char: str) -> int:
    return 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1


def str_width(text: str) -> int:
    """Display width of *text*: wide and fullwidth characters count twice."""
    if not text or not isinstance(text, str):
        return 0
    return sum(_char_width(char) for char in text)


def strimwidth(text: str, width: int, trim_marker: str = "") -> str:
    """Truncate *text* to *width* display columns, marker included.

    Returns the original text unchanged if it already fits.
    """
    if not text or not isinstance(text, str):
        return ""
    width = max(width, 0)
    if str_width(text) <= width:
        return text

    budget = max(width - str_width(trim_marker), 0)
    kept: list[str] = []
    used = 0
    for char in text:
        char_width = _char_width(char)
        if used + char_width > budget:
            break
        kept.append(char)
        used += char_width
    return "".join(kept) + trim_marker


def remove_tags(text: str, tags: Sequence[str] = ()) -> str:
    """Remove whole elements (tag, content and closing tag) named in *tags*."""
    if not text or not isinstance(text, str):
        return ""
    if not tags:
        return text

    alternation = "|".join(re.escape(tag) for tag in tags)
    pattern = re.compile(rf"<({alternation})(?:[^>]+)?>.*?</\1>", re.DOTALL)
    return pattern.sub("", text)


def starts_with(haystack: str, needle: str) -> bool:
    """Return True if *haystack* begins with *needle*."""
    return haystack.startswith(needle)


def ends_with(haystack: str, needle: str) -> bool:
    """Does *haystack* end with *needle*?"""
    return haystack.endswith(needle)
