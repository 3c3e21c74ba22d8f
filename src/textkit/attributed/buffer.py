"""Mutable rich-text buffer: characters plus attribute runs."""

from __future__ import annotations

from bisect import bisect_right
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .store import AttributeRangeError, Run, Span

_NO_ATTRIBUTES: Mapping[str, Any] = MappingProxyType({})


class RichTextBuffer:
    """Characters annotated with per-range attribute mappings.

    Runs tile ``[0, len(buffer))`` without gaps. Each run's mapping is a
    read-only proxy that is never mutated; changing attributes over a range
    swaps in new mappings for the affected runs only, so runs outside the
    range keep the very same mapping object.
    """

    def __init__(self) -> None:
        self._text = ""
        self._runs: List[Run] = []
        self.version = 0

    @classmethod
    def from_text(
        cls, text: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> "RichTextBuffer":
        buffer = cls()
        start, end = buffer.append_plain(text)
        for name, value in (attributes or {}).items():
            buffer.add_attribute(name, value, start, end)
        return buffer

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"RichTextBuffer({self._text!r}, runs={len(self._runs)})"

    @property
    def plain(self) -> str:
        return self._text

    def runs(self) -> Tuple[Run, ...]:
        return tuple(self._runs)

    def append_plain(self, text: str) -> Span:
        start = len(self._text)
        if not text:
            return (start, start)
        self._text += text
        self._runs.append(Run(start, len(self._text), _NO_ATTRIBUTES))
        self._coalesce()
        self.version += 1
        return (start, len(self._text))

    def add_attribute(self, name: str, value: Any, start: int, end: int) -> None:
        self._update_range(start, end, lambda attrs: {**attrs, name: value})

    def remove_attribute(self, name: str, start: int, end: int) -> None:
        def drop(attrs: Mapping[str, Any]) -> Dict[str, Any]:
            return {key: val for key, val in attrs.items() if key != name}

        self._update_range(start, end, drop)

    def attributes_at(self, index: int) -> Tuple[Mapping[str, Any], Span]:
        run = self._run_at(index)
        return run.attributes, run.span

    def attribute_at(self, name: str, index: int) -> Any:
        return self._run_at(index).attributes.get(name)

    def _run_at(self, index: int) -> Run:
        if index < 0 or index >= len(self._text):
            raise AttributeRangeError("Index out of range", index=index)
        position = bisect_right(self._runs, index, key=lambda run: run.start)
        return self._runs[position - 1]

    def _update_range(
        self,
        start: int,
        end: int,
        change: Callable[[Mapping[str, Any]], Dict[str, Any]],
    ) -> None:
        if start < 0 or end > len(self._text) or start > end:
            raise AttributeRangeError("Range out of bounds", span=(start, end))
        if start == end:
            return

        self._split_at(start)
        self._split_at(end)
        updated: List[Run] = []
        for run in self._runs:
            if start <= run.start and run.end <= end:
                run = Run(run.start, run.end, MappingProxyType(change(run.attributes)))
            updated.append(run)
        self._runs = updated
        self._coalesce()
        self.version += 1

    def _split_at(self, offset: int) -> None:
        for position, run in enumerate(self._runs):
            if run.start < offset < run.end:
                self._runs[position : position + 1] = [
                    Run(run.start, offset, run.attributes),
                    Run(offset, run.end, run.attributes),
                ]
                return

    def _coalesce(self) -> None:
        merged: List[Run] = []
        for run in self._runs:
            if merged and merged[-1].attributes == run.attributes:
                previous = merged[-1]
                run = Run(previous.start, run.end, previous.attributes)
                merged[-1] = run
            else:
                merged.append(run)
        self._runs = merged
