"""Fonts, colours, and the attribute names written into rich-text buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from rich.color import Color

FONT = "font"
FOREGROUND_COLOR = "foreground_color"

SYSTEM_FONT_FAMILY = "system-ui"
BOLD_WEIGHTS = frozenset({"semibold", "bold", "heavy", "black"})


@dataclass(frozen=True, slots=True)
class Font:
    """Font descriptor: family, point size and weight name."""

    family: str
    size: float
    weight: str = "regular"

    @classmethod
    def system(cls, size: float) -> "Font":
        return cls(family=SYSTEM_FONT_FAMILY, size=size)

    @classmethod
    def bold_system(cls, size: float) -> "Font":
        return cls(family=SYSTEM_FONT_FAMILY, size=size, weight="bold")

    @property
    def is_bold(self) -> bool:
        return self.weight.lower() in BOLD_WEIGHTS


def parse_color(value: str | Color) -> Color:
    """Accept a ``rich`` colour or anything ``Color.parse`` understands."""

    if isinstance(value, Color):
        return value
    return Color.parse(value)


@dataclass(frozen=True, slots=True)
class TextStyle:
    """A font plus an optional foreground colour.

    ``color=None`` means the renderer's default colour applies, so no colour
    attribute is written for text in this style.
    """

    font: Font
    color: Optional[Color] = None

    def attributes(self) -> Dict[str, object]:
        attrs: Dict[str, object] = {FONT: self.font}
        if self.color is not None:
            attrs[FOREGROUND_COLOR] = self.color
        return attrs


__all__ = [
    "BOLD_WEIGHTS",
    "Color",
    "FONT",
    "FOREGROUND_COLOR",
    "Font",
    "SYSTEM_FONT_FAMILY",
    "TextStyle",
    "parse_color",
]
