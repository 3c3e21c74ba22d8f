"""Runtime services (telemetry) shared by textkit modules."""

from . import telemetry

__all__ = ["telemetry"]
