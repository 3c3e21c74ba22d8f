"""Percent-encoding, base64, and conversions from text to URLs and bytes."""

from __future__ import annotations

import base64
import binascii
import re
import string
from dataclasses import dataclass
from typing import Optional
from urllib.parse import SplitResult, quote, urlsplit

QUERY_ALLOWED_CHARACTERS = "-._~!$&'()*+,;=:@/?"
"""Characters besides ASCII letters and digits left as-is in a query."""

LEGACY_RESERVED_CHARACTERS = "!*'();:@&=+$,/?%#[] "
"""The only ASCII characters the legacy-compatible mode percent-encodes."""

_LEGACY_SAFE = "".join(
    chr(code) for code in range(128) if chr(code) not in LEGACY_RESERVED_CHARACTERS
)
_BASE64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/=")
_URL_FORBIDDEN = frozenset('<>"{}|\\^`')
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def url_encoded_with_query(text: str) -> str:
    """Percent-encode ``text`` but keep characters valid in a URL query.

    ``:``, ``?``, ``&``, ``/`` and friends pass through. Text that has no
    UTF-8 form (lone surrogates) is returned unchanged.
    """

    try:
        return quote(text, safe=QUERY_ALLOWED_CHARACTERS)
    except UnicodeEncodeError:
        return text


def url_encoded(text: str) -> str:
    """Legacy-compatible encoding: escape only ``LEGACY_RESERVED_CHARACTERS``.

    Every other ASCII character is kept literally; bytes of non-ASCII
    characters are always escaped.
    """

    try:
        return quote(text, safe=_LEGACY_SAFE)
    except UnicodeEncodeError:
        return text


@dataclass(frozen=True, slots=True)
class Base64Codec:
    """Base64 over the UTF-8 form of text.

    Whitespace is always ignored when decoding. With
    ``ignore_unknown_characters`` every character outside the base64
    alphabet is dropped too; otherwise such characters make decoding fail.
    """

    ignore_unknown_characters: bool = False

    def encode(self, text: str) -> Optional[str]:
        data = to_data(text)
        if data is None:
            return None
        return base64.b64encode(data).decode("ascii")

    def decode(self, encoded: str) -> Optional[str]:
        if self.ignore_unknown_characters:
            cleaned = "".join(char for char in encoded if char in _BASE64_ALPHABET)
        else:
            cleaned = "".join(encoded.split())
        try:
            data = base64.b64decode(cleaned, validate=True)
            return data.decode("utf-8")
        except (binascii.Error, ValueError):
            # UnicodeDecodeError is a ValueError
            return None


DEFAULT_CODEC = Base64Codec()


def base64_encoded(text: str) -> Optional[str]:
    return DEFAULT_CODEC.encode(text)


def decode_base64(encoded: str) -> Optional[str]:
    """Decode base64 back to text, or ``None`` if it is not base64 of UTF-8."""

    return DEFAULT_CODEC.decode(encoded)


def to_url(text: str) -> Optional[SplitResult]:
    """Parse ``text`` as a URL reference, or return ``None`` if it is not one.

    Relative references count. Whitespace, control and non-ASCII characters
    are rejected along with ``_URL_FORBIDDEN``, malformed ``%`` escapes and
    unparsable hosts or ports.
    """

    if not text:
        return None
    for char in text:
        if ord(char) <= 0x20 or ord(char) >= 0x7F or char in _URL_FORBIDDEN:
            return None
    if _BAD_ESCAPE.search(text):
        return None
    try:
        result = urlsplit(text)
        result.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError:
        return None
    return result


def to_data(text: str) -> Optional[bytes]:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        return None
