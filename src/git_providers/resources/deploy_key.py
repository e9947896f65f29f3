"""Deploy key resource model."""

from __future__ import annotations

from typing import Annotated

from git_providers.resources.base import Resource
from git_providers.resources.enums import REPOSITORY_CREDENTIAL_TYPES, RepositoryCredentialType
from git_providers.resources.markers import EnumField, EnumValue, Required


class DeployKey(Resource):
    """An SSH public key granted access to a single repository.

    ``read_only`` defaults to ``True`` when unset; write access has to be
    asked for explicitly.
    """

    name: Annotated[str, Required()] = ""
    key: Annotated[str, Required()] = ""
    read_only: bool | None = None
    credential_type: Annotated[EnumValue, EnumField(REPOSITORY_CREDENTIAL_TYPES)] = (
        RepositoryCredentialType.DEPLOY_KEY.value
    )

    def default(self) -> None:
        if self.read_only is None:
            self.read_only = True
