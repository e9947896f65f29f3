"""Git provider resource definitions."""

from git_providers.resources.base import Creatable, Resource, default_and_validate
from git_providers.resources.deploy_key import DeployKey
from git_providers.resources.enums import (
    LICENSE_TEMPLATES,
    REGISTRIES,
    REPO_VISIBILITIES,
    REPOSITORY_CREDENTIAL_TYPES,
    REPOSITORY_PERMISSIONS,
    EnumRegistry,
    LicenseTemplate,
    RepositoryCredentialType,
    RepositoryPermission,
    RepoVisibility,
    TransportType,
    permission_rank,
    validate_license_template,
    validate_repo_visibility,
    validate_repository_credential_type,
    validate_repository_permission,
)
from git_providers.resources.refs import OrganizationRef, RepositoryRef, parse_repository_url
from git_providers.resources.repository import Repository, RepositoryCreateOptions
from git_providers.resources.team_access import TeamAccess

__all__ = [
    "LICENSE_TEMPLATES",
    "REGISTRIES",
    "REPOSITORY_CREDENTIAL_TYPES",
    "REPOSITORY_PERMISSIONS",
    "REPO_VISIBILITIES",
    "Creatable",
    "DeployKey",
    "EnumRegistry",
    "LicenseTemplate",
    "OrganizationRef",
    "RepoVisibility",
    "Repository",
    "RepositoryCreateOptions",
    "RepositoryCredentialType",
    "RepositoryPermission",
    "RepositoryRef",
    "Resource",
    "TeamAccess",
    "TransportType",
    "default_and_validate",
    "parse_repository_url",
    "permission_rank",
    "validate_license_template",
    "validate_repo_visibility",
    "validate_repository_credential_type",
    "validate_repository_permission",
]
