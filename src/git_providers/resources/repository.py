"""Repository resource models."""

from __future__ import annotations

from typing import Annotated

from git_providers.resources.base import Resource
from git_providers.resources.enums import LICENSE_TEMPLATES, REPO_VISIBILITIES, RepoVisibility
from git_providers.resources.markers import EnumField, EnumValue, Required

DEFAULT_BRANCH = "master"


class Repository(Resource):
    """Settings of a repository that can be created or reconciled."""

    name: Annotated[str, Required()] = ""
    description: str | None = None
    default_branch: str | None = None
    visibility: Annotated[EnumValue | None, EnumField(REPO_VISIBILITIES)] = None

    def default(self) -> None:
        if self.visibility is None:
            self.visibility = RepoVisibility.PRIVATE.value
        if self.default_branch is None:
            self.default_branch = DEFAULT_BRANCH


class RepositoryCreateOptions(Resource):
    """Options that only apply when a repository is first created."""

    auto_init: bool | None = None
    license_template: Annotated[EnumValue | None, EnumField(LICENSE_TEMPLATES)] = None
