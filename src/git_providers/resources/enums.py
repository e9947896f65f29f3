"""Enumerated value types and their validation registries.

Each validated enum has an ``EnumRegistry`` built once at import time. A
registry answers "is this a legal value" in O(1) and can also list the legal
values in declared order for error messages and docs.

``TransportType`` has no registry: it is never taken from user input as a raw
string, only passed to ``RepositoryRef.get_clone_url``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from git_providers.validation.errors import FieldEnumInvalidError

if TYPE_CHECKING:
    from collections.abc import Iterator

E = TypeVar("E", bound=Enum)


class TransportType(str, Enum):
    """Transport used when cloning a repository."""

    # https://<domain>/<org>/[<sub-orgs...>/]<repo>.git
    HTTPS = "https"
    # git@<domain>:<org>/[<sub-orgs...>/]<repo>.git
    GIT = "git"
    # ssh://git@<domain>/<org>/[<sub-orgs...>/]<repo>
    SSH = "ssh"


class RepositoryCredentialType(str, Enum):
    """Type of a repository credential."""

    DEPLOY_KEY = "deploykey"


class RepoVisibility(str, Enum):
    """Who can see a repository."""

    PUBLIC = "public"
    # Visible within the owning organization
    INTERNAL = "internal"
    # Visible to explicitly added members only
    PRIVATE = "private"


class RepositoryPermission(str, Enum):
    """Access level of a team or user on a repository.

    Members are declared from least to most privileged. The GitLab names are
    guest, reporter, developer, maintainer and owner respectively.
    """

    PULL = "pull"
    TRIAGE = "triage"
    PUSH = "push"
    MAINTAIN = "maintain"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        return _PERMISSION_ORDER.index(self)

    def includes(self, other: RepositoryPermission | str) -> bool:
        """True if this permission grants at least what *other* grants."""
        return self.rank >= permission_rank(other)


_PERMISSION_ORDER: tuple[RepositoryPermission, ...] = tuple(RepositoryPermission)


def permission_rank(value: RepositoryPermission | str) -> int:
    """Position of *value* in the privilege order (0 = ``pull``).

    Raises:
        ValueError: If *value* is not a declared permission.
    """
    return RepositoryPermission(value).rank


class LicenseTemplate(str, Enum):
    """License template applied when creating a repository.

    See https://choosealicense.com/licenses/ for the license texts.
    """

    APACHE_2 = "apache-2.0"
    MIT = "mit"
    GPL_3 = "gpl-3.0"


@dataclass(frozen=True)
class EnumRegistry(Generic[E]):
    """Closed set of legal string values for one enum type."""

    enum: type[E]
    values: tuple[str, ...]
    known: frozenset[str] = field(repr=False)

    @classmethod
    def of(cls, enum: type[E]) -> EnumRegistry[E]:
        values = tuple(member.value for member in enum)
        return cls(enum=enum, values=values, known=frozenset(values))

    @property
    def name(self) -> str:
        return self.enum.__name__

    def validate(self, value: object) -> FieldEnumInvalidError | None:
        """Return ``None`` if *value* is a member, else a bare enum error.

        Use as ``v.append(registry.validate(value), value, "field_name")``.
        """
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str) and value in self.known:
            return None
        return FieldEnumInvalidError(self.values)

    def __contains__(self, value: object) -> bool:
        return self.validate(value) is None

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


REPOSITORY_CREDENTIAL_TYPES = EnumRegistry.of(RepositoryCredentialType)
REPO_VISIBILITIES = EnumRegistry.of(RepoVisibility)
REPOSITORY_PERMISSIONS = EnumRegistry.of(RepositoryPermission)
LICENSE_TEMPLATES = EnumRegistry.of(LicenseTemplate)

REGISTRIES: tuple[EnumRegistry[Enum], ...] = (
    REPOSITORY_CREDENTIAL_TYPES,
    REPO_VISIBILITIES,
    REPOSITORY_PERMISSIONS,
    LICENSE_TEMPLATES,
)


def validate_repository_credential_type(value: object) -> FieldEnumInvalidError | None:
    return REPOSITORY_CREDENTIAL_TYPES.validate(value)


def validate_repo_visibility(value: object) -> FieldEnumInvalidError | None:
    return REPO_VISIBILITIES.validate(value)


def validate_repository_permission(value: object) -> FieldEnumInvalidError | None:
    return REPOSITORY_PERMISSIONS.validate(value)


def validate_license_template(value: object) -> FieldEnumInvalidError | None:
    return LICENSE_TEMPLATES.validate(value)
