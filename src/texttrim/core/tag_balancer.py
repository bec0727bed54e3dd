"""Close tags left dangling by truncation.

Best-effort linear repair, not a parser: balance is judged by comparing the
number of opening and closing tag tokens, and nesting order is never
validated (``<b><i>x</b></i>`` passes as balanced).
"""

from __future__ import annotations

import logging
import re

from texttrim.config.defaults import VOID_ELEMENTS

logger = logging.getLogger(__name__)

# Opening tag not ending in "/>", " >" or "|>". Lazy throughout, so the
# attribute part stops at the first acceptable ">".
_OPENING_TAG = re.compile(r"<([a-z]+?)(?: .*?)??(?<![/| ])>", re.IGNORECASE)
_CLOSING_TAG = re.compile(r"</([a-z]+?)>", re.IGNORECASE)


def close_tags(html: str) -> str:
    """Append closing tags for every tag opened but never closed in *html*.

    Missing tags are closed most-recently-opened first. When repair happens,
    void elements are normalised (see ``normalize_void_elements``).
    """
    opened = _OPENING_TAG.findall(html)
    closed = _CLOSING_TAG.findall(html)

    # counts match, treat as balanced
    if len(closed) == len(opened):
        return html

    appended: list[str] = []
    for name in reversed(opened):
        if name in closed:
            closed.remove(name)
        else:
            appended.append(f"</{name}>")

    logger.debug("Closed %d of %d opened tag(s)", len(appended), len(opened))
    return normalize_void_elements(html + "".join(appended))


def normalize_void_elements(html: str) -> str:
    """Drop ``</br>``-style closers and rewrite ``<br>`` as ``<br />``.

    Applies to br, hr and wbr. Matching is case-sensitive.
    """
    for name in VOID_ELEMENTS:
        html = html.replace(f"</{name}>", "")
    for name in VOID_ELEMENTS:
        html = html.replace(f"<{name}>", f"<{name} />")
    return html
