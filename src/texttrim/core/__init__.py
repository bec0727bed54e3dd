"""Core trimming logic."""

from texttrim.core.errors import InvalidArgumentError
from texttrim.core.hooks import FilterRegistry, Hooks, NullHooks
from texttrim.core.locale import Locale, SettingsLocale
from texttrim.core.tag_balancer import close_tags, normalize_void_elements
from texttrim.core.truncator import trim_characters, trim_words

__all__ = [
    "FilterRegistry",
    "Hooks",
    "InvalidArgumentError",
    "Locale",
    "NullHooks",
    "SettingsLocale",
    "close_tags",
    "normalize_void_elements",
    "trim_characters",
    "trim_words",
]
