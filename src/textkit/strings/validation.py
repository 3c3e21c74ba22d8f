"""Phone-number detection and email validation."""

from __future__ import annotations

import re

from .patterns import DEFAULT_MATCHER, PatternMatcher

EMAIL_PATTERN = (
    r'''(?:[a-z0-9!#$%\&'*+/=?\^_`{|}~-]+(?:\.[a-z0-9!#$%\&'*+/=?\^_`{|}~-]+)*'''
    r'''|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]'''
    r'''|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")'''
    r'''@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?'''
    r'''|\[(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}'''
    r'''(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?|[a-z0-9-]*[a-z0-9]:'''
    r'''(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]'''
    r'''|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\])$'''
)
"""RFC 5322 derived address pattern. Lowercase only, searched unanchored."""

MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15

# Optional +CC, optional (area), then two to five digit groups.
_PHONE_CANDIDATE = re.compile(
    r"(?<![\w+])"
    r"(?:\+\d{1,3}[\s.-]?)?"
    r"(?:\(\d{1,4}\)[\s.-]?)?"
    r"\d{2,4}(?:[\s.-]?\d{2,4}){1,4}"
    r"(?!\w)"
)
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_DOTTED_QUAD = re.compile(r"\d{1,3}(?:\.\d{1,3}){3}")


def is_phone_number(text: str) -> bool:
    """Return ``True`` if ``text`` contains something that looks like a phone number."""

    for candidate in _PHONE_CANDIDATE.finditer(text):
        value = candidate.group(0)
        if _ISO_DATE.fullmatch(value) or _DOTTED_QUAD.fullmatch(value):
            continue
        digits = sum(char.isdigit() for char in value)
        if MIN_PHONE_DIGITS <= digits <= MAX_PHONE_DIGITS:
            return True
    return False


def is_email(text: str, *, matcher: PatternMatcher = DEFAULT_MATCHER) -> bool:
    return matcher.is_matching(text, EMAIL_PATTERN)
