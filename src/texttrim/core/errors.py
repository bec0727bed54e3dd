"""Exceptions raised by the trimming helpers."""

from __future__ import annotations


class InvalidArgumentError(TypeError):
    """Raised when a trimming helper receives an argument of the wrong type.

    Negative limits are not errors: they are clamped to 0 and logged.
    """
