"""Tests for defaulting of unset optional fields."""

from __future__ import annotations

import pytest

from git_providers.resources.base import Creatable
from git_providers.resources.deploy_key import DeployKey
from git_providers.resources.repository import Repository, RepositoryCreateOptions
from git_providers.resources.team_access import TeamAccess

_CASES = [
    pytest.param(DeployKey(), DeployKey(read_only=True), id="DeployKey: empty"),
    pytest.param(
        DeployKey(read_only=True),
        DeployKey(read_only=True),
        id="DeployKey: don't set if set (default)",
    ),
    pytest.param(
        DeployKey(read_only=False),
        DeployKey(read_only=False),
        id="DeployKey: don't set if set (non-default)",
    ),
    pytest.param(
        Repository(),
        Repository(visibility="private", default_branch="master"),
        id="Repository: empty",
    ),
    pytest.param(
        Repository(visibility="private", default_branch="master"),
        Repository(visibility="private", default_branch="master"),
        id="Repository: don't set if set (default)",
    ),
    pytest.param(
        Repository(visibility="internal", default_branch="main"),
        Repository(visibility="internal", default_branch="main"),
        id="Repository: don't set if set (non-default)",
    ),
    pytest.param(TeamAccess(), TeamAccess(permission="pull"), id="TeamAccess: empty"),
    pytest.param(
        TeamAccess(permission="pull"),
        TeamAccess(permission="pull"),
        id="TeamAccess: don't set if set (default)",
    ),
    pytest.param(
        TeamAccess(permission="push"),
        TeamAccess(permission="push"),
        id="TeamAccess: don't set if set (non-default)",
    ),
]


class TestDefault:
    @pytest.mark.parametrize(("obj", "expected"), _CASES)
    def test_default(self, obj: Creatable, expected: Creatable) -> None:
        obj = obj.model_copy(deep=True)  # type: ignore[attr-defined]
        obj.default()
        assert obj.model_dump() == expected.model_dump()  # type: ignore[attr-defined]

    @pytest.mark.parametrize(("obj", "expected"), _CASES)
    def test_idempotent(self, obj: Creatable, expected: Creatable) -> None:
        obj = obj.model_copy(deep=True)  # type: ignore[attr-defined]
        obj.default()
        once = obj.model_dump()  # type: ignore[attr-defined]
        obj.default()
        assert obj.model_dump() == once == expected.model_dump()  # type: ignore[attr-defined]

    def test_explicit_false_is_not_overwritten(self) -> None:
        key = DeployKey(name="ci", key="ssh-ed25519 AAAA", read_only=False)
        key.default()
        assert key.read_only is False

    def test_explicit_empty_description_untouched(self) -> None:
        repo = Repository(name="r", description="")
        repo.default()
        assert repo.description == ""

    def test_unrelated_fields_preserved(self) -> None:
        repo = Repository(name="flux", description="GitOps")
        repo.default()
        assert repo.name == "flux"
        assert repo.description == "GitOps"

    def test_defaulted_field_reads_as_set(self) -> None:
        defaulted = TeamAccess(name="devs")
        defaulted.default()
        explicit = TeamAccess(name="devs", permission="pull")
        assert defaulted.model_fields_set == explicit.model_fields_set
        assert defaulted == explicit

    def test_defaults_do_not_leak_between_instances(self) -> None:
        first = Repository()
        first.default()
        assert Repository().visibility is None


class TestCreatable:
    @pytest.mark.parametrize("cls", [DeployKey, Repository, TeamAccess])
    def test_resources_are_creatable(self, cls: type) -> None:
        assert isinstance(cls(), Creatable)

    def test_create_options_not_creatable(self) -> None:
        assert not isinstance(RepositoryCreateOptions(), Creatable)
