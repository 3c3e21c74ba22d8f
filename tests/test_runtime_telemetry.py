from __future__ import annotations

from typing import Iterator, List, Tuple

import pytest

from textkit.runtime import telemetry


class RecordingLogger:
    def __init__(self) -> None:
        self.lines: List[Tuple[str, str]] = []

    def debug(self, message: str) -> None:
        self.lines.append(("debug", message))

    def info(self, message: str) -> None:
        self.lines.append(("info", message))

    def warning(self, message: str) -> None:
        self.lines.append(("warning", message))

    def error(self, message: str) -> None:
        self.lines.append(("error", message))


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> Iterator[RecordingLogger]:
    logger = RecordingLogger()
    monkeypatch.setitem(telemetry._LOGGER_CACHE, "textkit.test", logger)
    yield logger
    telemetry.configure()


def test_configure_with_preset_sets_level() -> None:
    telemetry.configure(preset="development")
    assert telemetry.active_level() == "debug"

    telemetry.configure(preset="Production")
    assert telemetry.active_level() == "warning"
    telemetry.configure()


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_level_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(level="info", preset="development")


def test_record_event_filters_by_level(recorder: RecordingLogger) -> None:
    telemetry.configure(level="warning")

    telemetry.record_event("quiet", level="info", logger_name="textkit.test")
    telemetry.record_event(
        "loud", level="warning", data={"pattern": "("}, logger_name="textkit.test"
    )

    assert recorder.lines == [("warning", "event::loud | pattern=(")]


def test_span_reports_failure_and_reraises(recorder: RecordingLogger) -> None:
    telemetry.configure(preset="development")

    with pytest.raises(KeyError):
        with telemetry.span("work", logger_name="textkit.test", metadata={"n": 1}):
            raise KeyError("boom")

    level, message = recorder.lines[-1]
    assert level == "error"
    assert message.startswith("event::span.fail | span=work | n=1 | reason=")


def test_span_logs_completion_at_debug(recorder: RecordingLogger) -> None:
    telemetry.configure(preset="development")

    with telemetry.span("work", logger_name="textkit.test"):
        pass

    level, message = recorder.lines[-1]
    assert level == "debug"
    assert message.startswith("event::span.done | span=work | elapsed_ms=")
