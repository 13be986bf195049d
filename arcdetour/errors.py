"""Mini README: Error taxonomy shared by planning and flight modules.

Structure:
    * PlanningError - base class for deterministic input errors.
    * InvalidConfiguration - bad arc or mission parameters.
    * InvalidCoordinate - latitude/longitude outside domain or non-finite.
    * MissionExecutionError - vehicle refused or timed out during a flight.

Planning errors subclass ``ValueError`` so callers that already guard
against bad input keep working. None of them are worth retrying with the
same arguments.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class PlanningError(ValueError):
    """Raised when a mission cannot be assembled from the given input."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        detail_str = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({detail_str})"


class InvalidConfiguration(PlanningError):
    """Arc or mission parameters that would produce a degenerate path."""


class InvalidCoordinate(PlanningError):
    """Coordinate outside [-90, 90] x [-180, 180] or not a finite number."""


class MissionExecutionError(RuntimeError):
    """Raised when the vehicle fails a step of the flight sequence."""

    def __init__(self, message: str, step: Optional[str] = None) -> None:
        super().__init__(message)
        self.step = step
