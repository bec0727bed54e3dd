"""Filter hooks — let callers observe and rewrite intermediate values.

``trim_words`` runs two filters: ``allowed_tags`` (before stripping) and
``trim_words_result`` (on the final string). Hooks are passed in explicitly;
there is no global registry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

FilterCallback = Callable[..., Any]


class Hooks(Protocol):
    """Protocol for filter hook providers."""

    def apply_filter(self, name: str, value: Any, *args: Any) -> Any:
        """Return *value* after running every filter registered for *name*."""
        ...


class NullHooks:
    """Hooks provider with no filters — every value passes through unchanged."""

    def apply_filter(self, name: str, value: Any, *args: Any) -> Any:
        return value


class FilterRegistry:
    """In-memory filter registry.

    Callbacks for a hook run in ascending priority, then in registration
    order. Each receives the previous callback's result followed by the
    extra arguments passed to ``apply_filter``.
    """

    def __init__(self) -> None:
        self._filters: dict[str, list[tuple[int, int, FilterCallback]]] = {}
        self._counter = 0

    def add_filter(
        self,
        name: str,
        callback: FilterCallback,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register *callback* for hook *name*."""
        self._filters.setdefault(name, []).append((priority, self._counter, callback))
        self._filters[name].sort(key=lambda entry: (entry[0], entry[1]))
        self._counter += 1
        logger.debug("Added filter %r (priority %d)", name, priority)

    def remove_filter(self, name: str, callback: FilterCallback) -> bool:
        """Unregister the first matching *callback*. Returns True if one was removed."""
        entries = self._filters.get(name, [])
        for index, (_, _, registered) in enumerate(entries):
            if registered == callback:
                del entries[index]
                if not entries:
                    del self._filters[name]
                return True
        return False

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filter(self, name: str, value: Any, *args: Any) -> Any:
        # Snapshot so callbacks may (un)register filters while running.
        for _, _, callback in list(self._filters.get(name, ())):
            value = callback(value, *args)
        return value
