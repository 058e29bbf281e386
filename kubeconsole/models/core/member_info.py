"""User and permission models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kubeconsole.constants.enums import Permission


class Member(BaseModel):
    """User signed in to the console."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str = ""
    is_admin: bool = Field(default=False, alias="isAdmin")


class GroupConfig(BaseModel):
    """Permissions granted to a user group, per resource kind."""

    group: str
    permissions: dict[str, set[Permission]] = Field(default_factory=dict)

    @classmethod
    def from_table(cls, group: str, table: dict[str, list[str]]) -> GroupConfig:
        """Build a config from a ``resource -> [permission, ...]`` table."""
        return cls(
            group=group,
            permissions={
                resource: {Permission(value) for value in values}
                for resource, values in table.items()
            },
        )

    def allows(self, resource: str, permission: Permission) -> bool:
        return permission in self.permissions.get(resource, set())
