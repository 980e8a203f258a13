#!/usr/bin/env python3
# webterm/ui/utils/markup.py
from __future__ import annotations

"""
Output-line markup helpers.

Lines emitted to a display are small HTML fragments (e.g. "<strong>..</strong>").
- escape(): neutralize markup-significant characters in untrusted text.
- render_markup(): turn a fragment into terminal text (ANSI bold for
  <strong>/<b>, other tags dropped, entities decoded).
"""

import html
import re
from typing import Any

from .ansi import ANSI

_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})

_TAG_RE = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)[^>]*>")
_BOLD_TAGS = {"strong", "b"}


def escape(text: Any) -> str:
    """Escape HTML special characters; non-strings are converted with str() first."""
    if not isinstance(text, str):
        text = str(text)
    return text.translate(_ESCAPES)


def render_markup(fragment: str, *, color: bool = True) -> str:
    """Render an output fragment as terminal text."""

    def _replace(match: re.Match[str]) -> str:
        closing, tag = match.group(1), match.group(2).lower()
        if tag == "br":
            return "\n"
        if not color or tag not in _BOLD_TAGS:
            return ""
        return ANSI["reset"] if closing else ANSI["bold"]

    return html.unescape(_TAG_RE.sub(_replace, fragment))
