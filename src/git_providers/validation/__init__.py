"""Field-level validation errors and accumulation."""

from git_providers.validation.errors import (
    FieldEnumInvalidError,
    FieldInvalidError,
    FieldRequiredError,
    FieldValidationError,
    FieldViolation,
    GitProviderError,
    InvalidObjectError,
)
from git_providers.validation.validator import Validator, join_field_path

__all__ = [
    "FieldEnumInvalidError",
    "FieldInvalidError",
    "FieldRequiredError",
    "FieldValidationError",
    "FieldViolation",
    "GitProviderError",
    "InvalidObjectError",
    "Validator",
    "join_field_path",
]
