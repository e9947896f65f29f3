"""References identifying organizations and repositories on a git host."""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from git_providers.resources.enums import TransportType


def _split_domain(domain: str) -> tuple[str, str]:
    """Return ``(scheme, host)``; a bare host implies https."""
    if "://" in domain:
        scheme, _, host = domain.partition("://")
        return scheme, host.rstrip("/")
    return "https", domain.rstrip("/")


class OrganizationRef(BaseModel):
    """An organization, optionally nested in sub-organizations (GitLab groups)."""

    model_config = ConfigDict(frozen=True)

    domain: str = Field(min_length=1)
    organization: str = Field(min_length=1)
    sub_organizations: tuple[str, ...] = ()

    @property
    def path(self) -> str:
        return "/".join((self.organization, *self.sub_organizations))

    def get_url(self) -> str:
        scheme, host = _split_domain(self.domain)
        return f"{scheme}://{host}/{self.path}"

    def __str__(self) -> str:
        return self.get_url()


class RepositoryRef(OrganizationRef):
    """A repository owned by an organization."""

    repository_name: str = Field(min_length=1)

    @property
    def path(self) -> str:
        return f"{super().path}/{self.repository_name}"

    def get_clone_url(self, transport: TransportType | str) -> str:
        """Build the clone URL for *transport*.

        Raises:
            ValueError: If *transport* is not a ``TransportType``.
        """
        transport = TransportType(transport)
        scheme, host = _split_domain(self.domain)
        if transport is TransportType.HTTPS:
            return f"{scheme}://{host}/{self.path}.git"
        if transport is TransportType.GIT:
            return f"git@{host}:{self.path}.git"
        return f"ssh://git@{host}/{self.path}"


def parse_repository_url(url: str) -> RepositoryRef:
    """Parse ``https://<domain>/<org>/[<sub-orgs...>/]<repo>[.git]``.

    Raises:
        ValueError: If *url* is not an http(s) URL with at least an
            organization and a repository segment.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Not an http(s) repository URL: {url!r}")
    parts = [p for p in parsed.path.split("/") if p]
    if len(parts) < 2:
        raise ValueError(f"Repository URL needs an organization and a name: {url!r}")
    domain = parsed.netloc if parsed.scheme == "https" else f"http://{parsed.netloc}"
    return RepositoryRef(
        domain=domain,
        organization=parts[0],
        sub_organizations=tuple(parts[1:-1]),
        repository_name=parts[-1].removesuffix(".git"),
    )
