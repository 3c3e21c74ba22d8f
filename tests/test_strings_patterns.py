from __future__ import annotations

import re
from typing import Any, Dict, List, Tuple

from textkit.strings import PatternMatcher, is_matching, matches


class RecordingDiagnostics:
    def __init__(self) -> None:
        self.reports: List[Tuple[str, Dict[str, Any]]] = []

    def report(self, event: str, data: Dict[str, Any]) -> None:
        self.reports.append((event, data))


def make_matcher() -> Tuple[PatternMatcher, RecordingDiagnostics]:
    diagnostics = RecordingDiagnostics()
    return PatternMatcher(diagnostics), diagnostics


def test_is_matching_finds_match_anywhere() -> None:
    matcher, diagnostics = make_matcher()

    assert matcher.is_matching("order 66 executed", r"\d+")
    assert not matcher.is_matching("no digits", r"\d+")
    assert diagnostics.reports == []


def test_is_matching_is_case_sensitive_unless_flagged() -> None:
    matcher, _ = make_matcher()

    assert not matcher.is_matching("HELLO", "hello")
    assert matcher.is_matching("HELLO", "hello", re.IGNORECASE)


def test_matches_returns_full_match_then_groups() -> None:
    matcher, _ = make_matcher()

    assert matcher.matches("12-34", r"(\d+)-(\d+)") == ["12-34", "12", "34"]


def test_matches_flattens_every_match() -> None:
    matcher, _ = make_matcher()

    assert matcher.matches("a1 b2", r"([a-z])(\d)") == ["a1", "a", "1", "b2", "b", "2"]
    assert matcher.matches("a1b2", r"\d") == ["1", "2"]


def test_matches_skips_groups_that_did_not_participate() -> None:
    matcher, _ = make_matcher()

    assert matcher.matches("ac abc", r"a(b)?c") == ["ac", "abc", "b"]


def test_invalid_pattern_is_reported_not_raised() -> None:
    matcher, diagnostics = make_matcher()

    assert matcher.is_matching("anything", "(unclosed") is False
    assert matcher.matches("anything", "[z-a]") == []

    events = [event for event, _ in diagnostics.reports]
    assert events == ["patterns.invalid", "patterns.invalid"]
    assert diagnostics.reports[0][1]["pattern"] == "(unclosed"


def test_module_level_helpers() -> None:
    assert is_matching("abc", "b")
    assert matches("12-34", r"(\d+)-(\d+)") == ["12-34", "12", "34"]
