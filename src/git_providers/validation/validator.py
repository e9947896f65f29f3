"""Field error accumulation."""

from __future__ import annotations

from typing import Any

from git_providers.validation.errors import (
    FieldInvalidError,
    FieldRequiredError,
    FieldValidationError,
    FieldViolation,
    InvalidObjectError,
)


def join_field_path(*field_path: str | int) -> str:
    """Join path segments into ``a.b[0].c`` form."""
    out = ""
    for segment in field_path:
        if isinstance(segment, int):
            out += f"[{segment}]"
        elif out:
            out += f".{segment}"
        else:
            out = segment
    return out


class Validator:
    """Collects field violations for one object so they can be reported together.

    Typical use::

        v = Validator("Repository")
        v.append(validate_repo_visibility(repo.visibility), repo.visibility, "visibility")
        v.raise_if_invalid()
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._violations: list[FieldViolation] = []

    @property
    def violations(self) -> list[FieldViolation]:
        return list(self._violations)

    def append(self, err: FieldValidationError | None, value: Any, *field_path: str | int) -> None:
        """Record *err* at *field_path*. ``None`` is ignored."""
        if err is None:
            return
        self._violations.append(
            FieldViolation(field=join_field_path(*field_path), value=value, error=err)
        )

    def required(self, *field_path: str | int) -> None:
        self.append(FieldRequiredError(), None, *field_path)

    def invalid(self, value: Any, *field_path: str | int) -> None:
        self.append(FieldInvalidError(), value, *field_path)

    def by_field(self) -> dict[str, str]:
        err = self.error()
        return err.by_field() if err is not None else {}

    def error(self) -> InvalidObjectError | None:
        if not self._violations:
            return None
        return InvalidObjectError(self.name, list(self._violations))

    def raise_if_invalid(self) -> None:
        err = self.error()
        if err is not None:
            raise err

    def __len__(self) -> int:
        return len(self._violations)
