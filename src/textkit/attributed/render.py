"""Export rich-text buffers to ``rich`` renderables."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from rich.style import Style
from rich.text import Text

from .store import TextAttributeStore
from .styles import FONT, FOREGROUND_COLOR, Font


def style_for(attributes: Mapping[str, Any]) -> Optional[Style]:
    """Map a run's attributes to a terminal style, or ``None`` if nothing maps.

    Terminals have no font family or size, so only the weight survives.
    """

    color = attributes.get(FOREGROUND_COLOR)
    font = attributes.get(FONT)
    bold = isinstance(font, Font) and font.is_bold
    if color is None and not bold:
        return None
    return Style(color=color, bold=bold or None)


def to_rich_text(buffer: TextAttributeStore) -> Text:
    """Build a ``rich.text.Text`` with one span per styled run."""

    text = Text(buffer.plain)
    for run in buffer.runs():
        style = style_for(run.attributes)
        if style is not None:
            text.stylize(style, run.start, run.end)
    return text
