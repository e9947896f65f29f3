"""Configuration models for YAML-declared repositories."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from git_providers.resources.deploy_key import DeployKey
from git_providers.resources.refs import RepositoryRef
from git_providers.resources.repository import Repository, RepositoryCreateOptions
from git_providers.resources.team_access import TeamAccess


class ProviderSettings(BaseSettings):
    """Git host settings.

    Fields can be set via YAML (constructor kwargs) or environment variables
    with the ``GITPROVIDER_`` prefix.  Constructor kwargs take precedence.

    ``organization`` may name a sub-organization path, e.g. ``group/subgroup``.
    """

    model_config = SettingsConfigDict(env_prefix="GITPROVIDER_")

    domain: str = "github.com"
    organization: str | None = None


def _none_to_list(v: Any) -> Any:
    return v if v is not None else []


class RepositoryEntry(Repository):
    """A repository declared in YAML along with its keys and team grants."""

    options: RepositoryCreateOptions = Field(default_factory=RepositoryCreateOptions)
    deploy_keys: Annotated[list[DeployKey], BeforeValidator(_none_to_list)] = []
    teams: Annotated[list[TeamAccess], BeforeValidator(_none_to_list)] = []

    def default(self) -> None:
        super().default()
        for key in self.deploy_keys:
            key.default()
        for team in self.teams:
            team.default()

    def ref(self, provider: ProviderSettings) -> RepositoryRef:
        """Reference to this repository under the provider's organization.

        Raises:
            ValueError: If the provider has no organization.
        """
        if not provider.organization:
            raise ValueError("provider.organization is required to reference repositories")
        parts = [part for part in provider.organization.split("/") if part]
        if not parts:
            raise ValueError(f"invalid provider.organization {provider.organization!r}")
        org, *subs = parts
        return RepositoryRef(
            domain=provider.domain,
            organization=org,
            sub_organizations=tuple(subs),
            repository_name=self.name,
        )


class Config(BaseModel):
    """Repository configuration, as produced by ``load_config()``."""

    model_config = ConfigDict(extra="forbid")

    provider: ProviderSettings
    repositories: Annotated[list[RepositoryEntry], BeforeValidator(_none_to_list)] = []

    def refs(self) -> list[RepositoryRef]:
        return [repo.ref(self.provider) for repo in self.repositories]
