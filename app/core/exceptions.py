"""
Validation errors raised by the hydration deviation engine.
Routes translate these into HTTP 422 responses via ``to_dict()``.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional


class HydrationValidationError(ValueError):
    """Raised when a profile or intake value cannot be evaluated.

    Attributes:
        message: human-readable message, safe to show to the user
        code: machine-readable error code
        details: optional mapping with the offending field and value
    """

    code = "invalid_input"
    default_message = "Invalid input"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = dict(details) if details else None

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class InvalidWeight(HydrationValidationError):
    """Weight is missing, zero, non-numeric, or below 30 kg."""

    code = "invalid_weight"
    default_message = "Please enter a valid weight (30+ kg)."


class InvalidIntake(HydrationValidationError):
    """Intake is missing, zero, non-numeric, or below 200 ml."""

    code = "invalid_intake"
    default_message = "Enter your daily water intake (min 200 ml)."
