"""Tests for organization/repository references and clone URLs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from git_providers.resources.enums import TransportType
from git_providers.resources.refs import OrganizationRef, RepositoryRef, parse_repository_url


@pytest.fixture
def repo_ref() -> RepositoryRef:
    return RepositoryRef(domain="github.com", organization="fluxcd", repository_name="flux2")


@pytest.fixture
def nested_ref() -> RepositoryRef:
    return RepositoryRef(
        domain="gitlab.com",
        organization="group",
        sub_organizations=("sub", "team"),
        repository_name="app",
    )


class TestOrganizationRef:
    def test_url(self) -> None:
        ref = OrganizationRef(domain="gitlab.com", organization="group", sub_organizations=("a",))
        assert ref.get_url() == "https://gitlab.com/group/a"
        assert str(ref) == "https://gitlab.com/group/a"

    def test_explicit_scheme_kept(self) -> None:
        ref = OrganizationRef(domain="http://git.local:8080/", organization="org")
        assert ref.get_url() == "http://git.local:8080/org"

    def test_frozen(self) -> None:
        ref = OrganizationRef(domain="github.com", organization="org")
        with pytest.raises(ValidationError):
            ref.organization = "other"  # type: ignore[misc]

    def test_empty_organization_rejected(self) -> None:
        with pytest.raises(ValidationError, match="organization"):
            OrganizationRef(domain="github.com", organization="")


class TestCloneURL:
    @pytest.mark.parametrize(
        ("transport", "expected"),
        [
            (TransportType.HTTPS, "https://github.com/fluxcd/flux2.git"),
            (TransportType.GIT, "git@github.com:fluxcd/flux2.git"),
            (TransportType.SSH, "ssh://git@github.com/fluxcd/flux2"),
        ],
    )
    def test_transports(self, repo_ref: RepositoryRef, transport, expected: str) -> None:
        assert repo_ref.get_clone_url(transport) == expected

    @pytest.mark.parametrize(
        ("transport", "expected"),
        [
            ("https", "https://gitlab.com/group/sub/team/app.git"),
            ("git", "git@gitlab.com:group/sub/team/app.git"),
            ("ssh", "ssh://git@gitlab.com/group/sub/team/app"),
        ],
    )
    def test_sub_organizations(self, nested_ref: RepositoryRef, transport, expected) -> None:
        assert nested_ref.get_clone_url(transport) == expected

    def test_unknown_transport(self, repo_ref: RepositoryRef) -> None:
        with pytest.raises(ValueError):
            repo_ref.get_clone_url("ftp")

    def test_repository_url(self, nested_ref: RepositoryRef) -> None:
        assert nested_ref.get_url() == "https://gitlab.com/group/sub/team/app"


class TestParseRepositoryURL:
    def test_simple(self, repo_ref: RepositoryRef) -> None:
        assert parse_repository_url("https://github.com/fluxcd/flux2") == repo_ref

    def test_git_suffix_and_trailing_slash(self, repo_ref: RepositoryRef) -> None:
        assert parse_repository_url("https://github.com/fluxcd/flux2.git/") == repo_ref

    def test_sub_organizations(self, nested_ref: RepositoryRef) -> None:
        assert parse_repository_url("https://gitlab.com/group/sub/team/app") == nested_ref

    def test_http_keeps_scheme(self) -> None:
        ref = parse_repository_url("http://git.local/org/repo")
        assert ref.get_clone_url("https") == "http://git.local/org/repo.git"

    @pytest.mark.parametrize(
        "url",
        ["git@github.com:org/repo.git", "https://github.com/org", "github.com/org/repo", ""],
    )
    def test_invalid(self, url: str) -> None:
        with pytest.raises(ValueError):
            parse_repository_url(url)
