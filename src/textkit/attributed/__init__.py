"""Rich-text buffers and the styled run builder."""

from .buffer import RichTextBuffer
from .builder import append_run, append_styled
from .render import style_for, to_rich_text
from .store import AttributeRangeError, Run, TextAttributeStore
from .styles import FONT, FOREGROUND_COLOR, Font, TextStyle, parse_color

__all__ = [
    "AttributeRangeError",
    "FONT",
    "FOREGROUND_COLOR",
    "Font",
    "RichTextBuffer",
    "Run",
    "TextAttributeStore",
    "TextStyle",
    "append_run",
    "append_styled",
    "parse_color",
    "style_for",
    "to_rich_text",
]
