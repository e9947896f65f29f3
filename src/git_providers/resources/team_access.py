"""Team access resource model."""

from __future__ import annotations

from typing import Annotated

from git_providers.resources.base import Resource
from git_providers.resources.enums import REPOSITORY_PERMISSIONS, RepositoryPermission
from git_providers.resources.markers import EnumField, EnumValue, Required


class TeamAccess(Resource):
    """Grant of a permission level on a repository to a team."""

    name: Annotated[str, Required()] = ""
    permission: Annotated[EnumValue | None, EnumField(REPOSITORY_PERMISSIONS)] = None

    def default(self) -> None:
        if self.permission is None:
            self.permission = RepositoryPermission.PULL.value
