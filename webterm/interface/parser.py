#!/usr/bin/env python3
# webterm/interface/parser.py
from __future__ import annotations

"""
Argument tokenizer for command lines.

Rules:
- Tokens are separated by runs of the space character (tabs are ordinary characters).
- A double-quoted segment standing on its own ("a b" followed by a space or the
  end of the line) becomes one token with the quotes stripped.
- Anything else is a plain word running up to the next space. Quote characters
  inside a plain word are kept verbatim, so glued segments like key:"a b" and
  unterminated quotes split on spaces like any other text. Quotes only protect
  spaces when the quoted segment is a whole token; a space inside a glued quote
  still ends the word:

      tokenize('key:"a b"')          -> ['key:"a', 'b"']
      tokenize('"unterminated a b')  -> ['"unterminated', 'a', 'b']
"""

from typing import Any

_QUOTE = '"'
_SPACE = " "


def _standalone_quote_end(line: str, start: int) -> int:
    """
    Return the index of the closing quote for a quote opening at `start`,
    or -1 when the quoted span is unterminated or glued to following text.
    """
    closing = line.find(_QUOTE, start + 1)
    if closing == -1:
        return -1
    after = closing + 1
    if after < len(line) and line[after] != _SPACE:
        return -1
    return closing


def tokenize(line: Any) -> list[str]:
    """Split a raw command line into argument tokens (quote-aware)."""
    if not isinstance(line, str):
        return []

    tokens: list[str] = []
    length = len(line)
    index = 0

    while index < length:
        while index < length and line[index] == _SPACE:
            index += 1
        if index == length:
            break

        if line[index] == _QUOTE:
            closing = _standalone_quote_end(line, index)
            if closing != -1:
                quoted = line[index + 1:closing]
                if quoted:
                    tokens.append(quoted)
                index = closing + 1
                continue

        # Plain word: quotes stay embedded
        end = line.find(_SPACE, index)
        if end == -1:
            end = length
        tokens.append(line[index:end])
        index = end

    return tokens


def first_token(line: str) -> str:
    """Return the first token of `line`, or the whole line when it has none."""
    tokens = tokenize(line)
    return tokens[0] if tokens else line
