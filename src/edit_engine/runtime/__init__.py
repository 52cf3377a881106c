"""Runtime services: configuration and telemetry."""

from . import telemetry
from .config import EngineConfig

__all__ = ["EngineConfig", "telemetry"]
