"""String and attributed-text conveniences."""

__all__ = [
    "attributed",
    "strings",
    "runtime",
]

__version__ = "0.1.0"
