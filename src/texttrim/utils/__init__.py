"""Utility functions for tag stripping, width truncation and string checks."""

from texttrim.utils.text_utils import (
    build_allowed_tags,
    ends_with,
    remove_tags,
    starts_with,
    str_width,
    strimwidth,
    strip_all_tags,
    strip_tags,
)

__all__ = [
    "build_allowed_tags",
    "ends_with",
    "remove_tags",
    "starts_with",
    "str_width",
    "strimwidth",
    "strip_all_tags",
    "strip_tags",
]
