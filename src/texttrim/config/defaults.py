"""Default constants for texttrim.

Locale-dependent defaults are overridable via ``TEXTTRIM_*`` environment
variables (see ``settings.py``). The rest are fixed by the trimming rules.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Allowed Tags
# Tags that survive stripping in trim_words(). Separated by one whitespace.
# Override per call, via the "allowed_tags" filter hook, or TEXTTRIM_ALLOWED_TAGS.
# ---------------------------------------------------------------------------
DEFAULT_ALLOWED_TAGS: str = "p a span b i br blockquote"

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------
DEFAULT_NUM_WORDS: int = 55
DEFAULT_NUM_CHARS: int = 60

# ---------------------------------------------------------------------------
# Continuation Marker
# Untranslated default appended to trimmed text ("&hellip;").
# ---------------------------------------------------------------------------
DEFAULT_MORE: str = "…"

# ---------------------------------------------------------------------------
# Word Count Types
# "characters" is meant for East Asian locales where every character counts
# as a unit. Anything else counts whitespace-delimited words.
# ---------------------------------------------------------------------------
WORD_COUNT_WORDS: str = "words"
WORD_COUNT_CHARACTERS: str = "characters"

DEFAULT_CHARSET: str = "UTF-8"

# ---------------------------------------------------------------------------
# Void Elements
# Elements normalised to self-closing form by close_tags().
# ---------------------------------------------------------------------------
VOID_ELEMENTS: tuple[str, ...] = ("br", "hr", "wbr")

# ---------------------------------------------------------------------------
# Hook Names
# ---------------------------------------------------------------------------
ALLOWED_TAGS_HOOK: str = "allowed_tags"
TRIM_WORDS_RESULT_HOOK: str = "trim_words_result"
