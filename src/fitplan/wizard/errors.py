"""Exceptions raised by the goal wizard."""

from __future__ import annotations

from dataclasses import dataclass


class WizardError(Exception):
    """Base class for wizard failures."""


class ZeroRateError(WizardError, ZeroDivisionError):
    """A projection was requested with a daily rate of zero."""


class InvalidDurationError(WizardError, ValueError):
    """The target date does not lie after the start date."""


@dataclass(frozen=True)
class FieldError:
    """A single rejected input field."""

    field: str
    code: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "code": self.code, "message": self.message}


class ValidationError(WizardError, ValueError):
    """One or more input fields are out of range."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(f"Invalid wizard input: {fields}")

    def to_dict(self) -> dict:
        return {"errors": [error.to_dict() for error in self.errors]}


class RateOutOfRangeError(WizardError, ValueError):
    """A weekly difference does not select a rung of the rate ladder."""
