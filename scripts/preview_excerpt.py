"""Print word- and width-based excerpts of an HTML file (or a sample post).

Usage:
    uv run python scripts/preview_excerpt.py [path/to/post.html]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure src/ is on sys.path when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from texttrim.config.settings import get_settings  # noqa: E402
from texttrim.core.truncator import trim_characters, trim_words  # noqa: E402

# ── Sample post used when no file is given ───────────────────────────────────
SAMPLE_POST = (
    "<h2>Release notes</h2>\n"
    "<p>This release brings <b>faster page rendering</b>, a reworked "
    '<a href="/docs/cache">cache layer</a> and <i>dozens</i> of small fixes.'
    "<br>Upgrading is recommended for every site.</p>\n"
    "<script>trackView();</script>\n"
    "<blockquote>Best release so far.</blockquote>"
)


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
        if not path.exists():
            print(f"File not found: {path}")
            return 1
        text = path.read_text(encoding="utf-8")
        print(f"Loaded {path} ({len(text)} chars)")
    else:
        text = SAMPLE_POST

    print("=" * 60)
    print("EXCERPT PREVIEW")
    print("=" * 60)
    print(f"Word count type: {settings.word_count_type}")
    print(f"Allowed tags:    {settings.allowed_tags}")
    print()

    print(f"-- trim_words ({settings.num_words}) " + "-" * 30)
    print(trim_words(text, settings.num_words, allowed_tags=settings.allowed_tags))
    print()
    print(f"-- trim_characters ({settings.num_chars}) " + "-" * 25)
    print(trim_characters(text, settings.num_chars))
    return 0


if __name__ == "__main__":
    sys.exit(main())
