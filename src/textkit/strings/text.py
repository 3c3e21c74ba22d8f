"""Trimming, slicing and counting."""

from __future__ import annotations

from typing import Optional

WHITESPACE_AND_NEWLINES = (
    "\t\n\v\f\r\x85"
    "\x20\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u202f\u205f\u3000"
    "\u2028\u2029"
)
"""Tab through carriage return, NEL, and the Unicode space/line/paragraph separators."""


def trim(text: str) -> str:
    """Strip leading and trailing ``WHITESPACE_AND_NEWLINES``.

    Unlike ``str.strip()``, the information separators U+001C-U+001F stay.
    """

    return text.strip(WHITESPACE_AND_NEWLINES)


def slice_between(text: str, start: str, end: str) -> Optional[str]:
    """Return what lies between the first ``start`` and the next ``end``.

    ``None`` when either delimiter is empty, ``start`` is missing, or no
    ``end`` follows it.
    """

    if not start or not end:
        return None
    head = text.find(start)
    if head == -1:
        return None
    head += len(start)
    tail = text.find(end, head)
    if tail == -1:
        return None
    return text[head:tail]


def length(text: str) -> int:
    return len(text)
