"""Base resource class and the defaulting protocol."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from git_providers.resources.markers import collect_field_errors
from git_providers.validation.validator import Validator

logger = logging.getLogger(__name__)


@runtime_checkable
class Creatable(Protocol):
    """An object that fills its unset optional fields before creation.

    ``default()`` only assigns fields that are ``None``. Fields that hold any
    value, including ``False`` or the default itself, are left alone, so the
    call is idempotent.
    """

    def default(self) -> None: ...


class Resource(BaseModel):
    """Base class for git provider resources.

    Resources are pure data. Optional fields use ``None`` for "unset" so that
    defaulting can tell them apart from fields explicitly set to a zero value.
    Construction never rejects enum values; call ``validate_info()`` to get
    every violation at once.
    """

    model_config = ConfigDict(extra="forbid")

    def validate_info(self) -> None:
        """Raise ``InvalidObjectError`` listing every invalid field."""
        v = Validator(type(self).__name__)
        collect_field_errors(self, v)
        v.raise_if_invalid()


def default_and_validate(obj: Resource) -> None:
    """Apply defaults (if *obj* is ``Creatable``) and then validate it.

    Run this on a configuration object right before building a create request.
    """
    if isinstance(obj, Creatable):
        logger.debug("Defaulting %s", type(obj).__name__)
        obj.default()
    obj.validate_info()
