"""Permission checks for the current user."""

from __future__ import annotations

from kubeconsole.constants.enums import Permission
from kubeconsole.models.core.member_info import GroupConfig, Member


def has_permission(
    member: Member | None,
    group_config: GroupConfig | None,
    resource: str,
    permission: Permission,
) -> bool:
    """Check whether a member's group may perform an action on a resource kind.

    Returns False until both the member and the group config are resolved.
    """
    if member is None or group_config is None:
        return False
    return group_config.allows(resource, permission)
