"""User service backed by persisted settings."""

from __future__ import annotations

import logging

from kubeconsole.constants.values import DEFAULT_GROUP_PERMISSIONS
from kubeconsole.models.core.member_info import GroupConfig, Member
from kubeconsole.models.state.settings_stream import SettingsStream

logger = logging.getLogger(__name__)


class SettingsUserService:
    """Resolves the current user and their group from UserSettings.

    Group permissions come from a static ``group -> resource -> permissions``
    table. Unknown groups resolve to an empty config.
    """

    def __init__(
        self,
        settings_stream: SettingsStream,
        group_permissions: dict[str, dict[str, list[str]]] | None = None,
    ) -> None:
        self._settings_stream = settings_stream
        self._group_permissions = (
            DEFAULT_GROUP_PERMISSIONS if group_permissions is None else group_permissions
        )

    @property
    def current_user_settings(self) -> SettingsStream:
        return self._settings_stream

    async def current_user(self) -> Member:
        settings = self._settings_stream.current
        return Member(
            id=settings.user_email or settings.user_name,
            name=settings.user_name,
            email=settings.user_email,
        )

    async def current_user_group(self, project_id: str) -> str:
        settings = self._settings_stream.current
        return settings.project_groups.get(project_id, settings.user_group)

    def group_config(self, group: str) -> GroupConfig:
        table = self._group_permissions.get(group)
        if table is None:
            logger.warning("Unknown user group %r, granting no permissions", group)
            return GroupConfig(group=group)
        return GroupConfig.from_table(group, table)
