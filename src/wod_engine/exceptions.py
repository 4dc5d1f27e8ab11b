"""Custom exception hierarchy for the workout engine."""

from __future__ import annotations


class WodEngineError(Exception):
    """Base exception for all wod_engine errors."""


class WeightTableError(WodEngineError, ValueError):
    """A weight table is empty, has negative weights, or does not sum to 1."""


class WeightConfigError(WodEngineError, ValueError):
    """A weight configuration is incomplete or breaks a format exclusion."""

    def __init__(self, message: str, version: str | None = None) -> None:
        super().__init__(message)
        self.version = version


class SerializationError(WodEngineError, ValueError):
    """A stored workout record could not be decoded."""
