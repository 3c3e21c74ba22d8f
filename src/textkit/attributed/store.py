"""Boundary types for attribute stores: runs, the store protocol, errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, Tuple

Span = Tuple[int, int]  # half-open [start, end)


@dataclass(frozen=True, slots=True)
class Run:
    """Snapshot of one contiguous range sharing a single attribute mapping."""

    start: int
    end: int
    attributes: Mapping[str, Any]

    @property
    def span(self) -> Span:
        return (self.start, self.end)

    def __len__(self) -> int:
        return self.end - self.start


class TextAttributeStore(Protocol):
    """What the run builder needs from a rich-text buffer."""

    def __len__(self) -> int:
        ...

    @property
    def plain(self) -> str:
        """Return the characters without attributes."""
        ...

    def append_plain(self, text: str) -> Span:
        """Append ``text`` with no attributes and return the inserted span."""
        ...

    def add_attribute(self, name: str, value: Any, start: int, end: int) -> None:
        """Set ``name`` to ``value`` over exactly ``[start, end)``."""
        ...

    def attributes_at(self, index: int) -> Tuple[Mapping[str, Any], Span]:
        """Return the attributes at ``index`` and the range they cover."""
        ...

    def runs(self) -> Tuple[Run, ...]:
        """Return the runs tiling the buffer, in order."""
        ...


class AttributeRangeError(RuntimeError):
    """Raised when an index or range falls outside the buffer."""

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        span: Optional[Span] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.span = span
