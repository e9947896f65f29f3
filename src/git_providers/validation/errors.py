"""Validation error types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class GitProviderError(Exception):
    """Base exception for git-providers errors."""


class FieldValidationError(GitProviderError):
    """Base class for bare, context-free field errors.

    Instances carry no field path; a ``Validator`` attaches the field name and
    offending value when it records them.
    """

    default_message = "field is invalid"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class FieldRequiredError(FieldValidationError):
    """A required field is missing or empty."""

    default_message = "field is required"


class FieldInvalidError(FieldValidationError):
    """A field holds a malformed value."""

    default_message = "field is invalid"


class FieldEnumInvalidError(FieldValidationError):
    """A field value is not among the declared enum values."""

    default_message = "field value isn't among the allowed enum values"

    def __init__(self, allowed: tuple[str, ...] = ()) -> None:
        self.allowed = allowed
        msg = self.default_message
        if allowed:
            msg += f" ({', '.join(allowed)})"
        super().__init__(msg)


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A field error tied to the field path and value that produced it."""

    field: str
    value: Any
    error: FieldValidationError

    @property
    def message(self) -> str:
        msg = f"{self.field}: {self.error}"
        if isinstance(self.error, FieldRequiredError):
            return msg
        return f"{msg} (got {self.value!r})"

    def __str__(self) -> str:
        return self.message


class InvalidObjectError(GitProviderError):
    """One or more fields of an object failed validation."""

    def __init__(self, name: str, violations: list[FieldViolation]) -> None:
        self.name = name
        self.violations = violations
        msg = f"{name} is invalid:\n" + "\n".join(f"  - {v}" for v in violations)
        super().__init__(msg)

    @property
    def errors(self) -> list[str]:
        return [v.message for v in self.violations]

    def by_field(self) -> dict[str, str]:
        """Field path → message; later violations on one field are joined."""
        out: dict[str, str] = {}
        for v in self.violations:
            text = str(v.error)
            out[v.field] = f"{out[v.field]}; {text}" if v.field in out else text
        return out

    def has_kind(self, kind: type[FieldValidationError]) -> bool:
        """Return True if any violation is of error class *kind*."""
        return any(isinstance(v.error, kind) for v in self.violations)
