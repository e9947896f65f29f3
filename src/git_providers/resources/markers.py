"""Declarative field markers for resource models.

Two markers attach to Pydantic fields via ``Annotated``:

- ``Required``  - field must be set to a non-empty value
- ``EnumField`` - field value must belong to an ``EnumRegistry``

``collect_field_errors()`` introspects these markers at runtime and records
every violation on a ``Validator``. Nested models (and lists of them) are
walked so that one validator can cover a whole configuration tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator

if TYPE_CHECKING:
    from enum import Enum

    from pydantic.fields import FieldInfo

    from git_providers.resources.enums import EnumRegistry
    from git_providers.validation.validator import Validator

M = TypeVar("M")


# ── Marker dataclasses ──────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Required:
    """Field must not be ``None`` or empty."""


@dataclass(frozen=True, slots=True)
class EnumField:
    """Field value must be a member of ``registry``.

    ``None`` means "unset" and is not checked.
    """

    registry: EnumRegistry[Enum]


def _scalar_to_str(v: Any) -> Any:
    """Let YAML scalars such as ``5`` or ``true`` reach the enum registry as strings."""
    if isinstance(v, bool | int | float):
        return str(v)
    return v


# Type of enum-backed fields: any string parses, the registry decides validity.
EnumValue = Annotated[str, BeforeValidator(_scalar_to_str)]


# ── Shared introspection primitives ─────────────────────────────────


def _find_marker(field_info: FieldInfo, marker_type: type[M]) -> M | None:
    """Return the first marker of *marker_type* on a field, or ``None``."""
    return next((m for m in field_info.metadata if isinstance(m, marker_type)), None)


def _iter_marked_fields(
    model_or_cls: Any,
    marker_type: type[M],
) -> list[tuple[str, FieldInfo, M]]:
    """Return ``(field_name, field_info, marker)`` for every field carrying *marker_type*."""
    cls = model_or_cls if isinstance(model_or_cls, type) else type(model_or_cls)
    return [
        (name, fi, marker)
        for name, fi in cls.model_fields.items()
        if (marker := _find_marker(fi, marker_type)) is not None
    ]


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str | bytes | list | dict) and not value)


# ── Public helpers ──────────────────────────────────────────────────


def required_fields(model_or_cls: Any) -> list[str]:
    """Names of fields marked ``Required``."""
    return [name for name, _, _ in _iter_marked_fields(model_or_cls, Required)]


def enum_fields(model_or_cls: Any) -> dict[str, EnumRegistry[Enum]]:
    """Field name → registry for fields marked ``EnumField``."""
    return {name: m.registry for name, _, m in _iter_marked_fields(model_or_cls, EnumField)}


def collect_field_errors(model: BaseModel, validator: Validator, *prefix: str | int) -> None:
    """Append a violation to *validator* for every invalid marked field of *model*.

    Field paths are rooted at *prefix*, e.g. ``("repositories", 0)``.
    """
    for name in required_fields(model):
        if _is_empty(getattr(model, name)):
            validator.required(*prefix, name)

    for name, registry in enum_fields(model).items():
        value = getattr(model, name)
        if value is not None:
            validator.append(registry.validate(value), value, *prefix, name)

    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            collect_field_errors(value, validator, *prefix, name)
        elif isinstance(value, list):
            for i, item in enumerate(value):
                if isinstance(item, BaseModel):
                    collect_field_errors(item, validator, *prefix, name, i)
