"""Exceptions raised by the salary calculation engine."""

from __future__ import annotations

from typing import Any


class SalarySlipError(Exception):
    """Base class for salary calculation errors."""


class InvalidInputError(SalarySlipError, ValueError):
    """Raised when the employee record is missing or unusable."""

    def __init__(self, argument: str, reason: str = "is required"):
        self.argument = argument
        self.reason = reason
        super().__init__(f"'{argument}' {reason}")


class OutOfRangeError(SalarySlipError, ValueError):
    """Raised when a numeric employee field is outside its valid range."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"invalid {field}: {value!r}")


class MissingCollaboratorError(SalarySlipError, RuntimeError):
    """Raised when a calculation needs a collaborator that was not configured."""

    def __init__(self, collaborator: str, needed_by: str):
        self.collaborator = collaborator
        self.needed_by = needed_by
        super().__init__(f"{needed_by} requires a {collaborator}, but none was configured")
