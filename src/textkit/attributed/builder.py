"""Append styled runs to a rich-text buffer."""

from __future__ import annotations

from typing import Optional, TypeVar

from rich.color import Color

from textkit.runtime import telemetry

from .store import TextAttributeStore
from .styles import FONT, FOREGROUND_COLOR, Font, TextStyle

StoreT = TypeVar("StoreT", bound=TextAttributeStore)


def append_run(
    buffer: StoreT, text: str, font: Font, color: Optional[Color] = None
) -> StoreT:
    """Append ``text`` at the end of ``buffer`` in ``font`` and ``color``.

    The new characters start with no attributes, then get the font and (when
    given) the colour over exactly their own range. Runs already in the
    buffer are left as they were. An empty ``text`` leaves the buffer alone.
    """

    if not text:
        return buffer

    with telemetry.span(
        "attributed::append_run",
        logger_name="textkit.attributed",
        metadata={"length": len(text)},
    ):
        start, end = buffer.append_plain(text)
        buffer.add_attribute(FONT, font, start, end)
        if color is not None:
            buffer.add_attribute(FOREGROUND_COLOR, color, start, end)
    return buffer


def append_styled(buffer: StoreT, text: str, style: TextStyle) -> StoreT:
    return append_run(buffer, text, style.font, style.color)
