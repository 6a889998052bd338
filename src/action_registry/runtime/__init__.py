"""Runtime services shared by the registry."""

from . import telemetry

__all__ = ["telemetry"]
