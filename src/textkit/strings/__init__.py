"""Encoding, matching, validation and slicing helpers for plain strings."""

from .encoding import (
    LEGACY_RESERVED_CHARACTERS,
    QUERY_ALLOWED_CHARACTERS,
    Base64Codec,
    base64_encoded,
    decode_base64,
    to_data,
    to_url,
    url_encoded,
    url_encoded_with_query,
)
from .patterns import (
    Diagnostics,
    PatternMatcher,
    TelemetryDiagnostics,
    is_matching,
    matches,
)
from .text import length, slice_between, trim
from .validation import EMAIL_PATTERN, is_email, is_phone_number

__all__ = [
    "Base64Codec",
    "Diagnostics",
    "EMAIL_PATTERN",
    "LEGACY_RESERVED_CHARACTERS",
    "PatternMatcher",
    "QUERY_ALLOWED_CHARACTERS",
    "TelemetryDiagnostics",
    "base64_encoded",
    "decode_base64",
    "is_email",
    "is_matching",
    "is_phone_number",
    "length",
    "matches",
    "slice_between",
    "to_data",
    "to_url",
    "trim",
    "url_encoded",
    "url_encoded_with_query",
]
