"""Regular-expression helpers that never raise on a bad pattern."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Protocol

from textkit.runtime import telemetry

Flags = int | re.RegexFlag


class Diagnostics(Protocol):
    """Receives reports about problems the caller never sees as exceptions."""

    def report(self, event: str, data: Dict[str, Any]) -> None:
        ...


class TelemetryDiagnostics:
    """Forward reports to telemetry as warning-level events."""

    def __init__(self, logger_name: str = "textkit.patterns") -> None:
        self.logger_name = logger_name

    def report(self, event: str, data: Dict[str, Any]) -> None:
        telemetry.record_event(
            event, level="warning", data=data, logger_name=self.logger_name
        )


class PatternMatcher:
    """Compile-and-match front end over ``re``.

    An invalid pattern is reported to ``diagnostics`` as
    ``patterns.invalid`` and treated as matching nothing.
    """

    def __init__(self, diagnostics: Optional[Diagnostics] = None) -> None:
        self.diagnostics = diagnostics or TelemetryDiagnostics()

    def compile(self, pattern: str, flags: Flags = 0) -> Optional[re.Pattern[str]]:
        try:
            return re.compile(pattern, flags)
        except re.error as exc:
            self.diagnostics.report(
                "patterns.invalid",
                {"pattern": pattern, "error": str(exc), "position": exc.pos},
            )
            return None

    def is_matching(self, text: str, pattern: str, flags: Flags = 0) -> bool:
        """Return ``True`` if ``pattern`` matches anywhere in ``text``."""

        compiled = self.compile(pattern, flags)
        if compiled is None:
            return False
        return compiled.search(text) is not None

    def matches(self, text: str, pattern: str, flags: Flags = 0) -> List[str]:
        """Return every match flattened: the full match, then its groups.

        Groups that did not take part in a match are skipped.
        """

        compiled = self.compile(pattern, flags)
        if compiled is None:
            return []

        values: List[str] = []
        for match in compiled.finditer(text):
            for index in range(compiled.groups + 1):
                group = match.group(index)
                if group is not None:
                    values.append(group)
        return values


DEFAULT_MATCHER = PatternMatcher()


def is_matching(text: str, pattern: str, flags: Flags = 0) -> bool:
    return DEFAULT_MATCHER.is_matching(text, pattern, flags)


def matches(text: str, pattern: str, flags: Flags = 0) -> List[str]:
    return DEFAULT_MATCHER.matches(text, pattern, flags)
