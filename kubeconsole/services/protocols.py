"""Contracts for the services the node list depends on."""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from kubeconsole.models.core.member_info import GroupConfig, Member
from kubeconsole.models.state.settings_stream import SettingsStream


@dataclass(frozen=True)
class DialogConfig:
    """Content and behaviour of a confirmation dialog."""

    title: str
    message: str
    confirm_label: str = "OK"
    disable_close: bool = False


@runtime_checkable
class ClusterService(Protocol):
    async def delete_node(self, project_id: str, cluster_id: str, node_id: str) -> None: ...


@runtime_checkable
class UserService(Protocol):
    @property
    def current_user_settings(self) -> SettingsStream: ...

    async def current_user(self) -> Member: ...

    async def current_user_group(self, project_id: str) -> str: ...

    def group_config(self, group: str) -> GroupConfig: ...


@runtime_checkable
class NotificationService(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


@runtime_checkable
class ConfirmationDialog(Protocol):
    def open(self, config: DialogConfig) -> Awaitable[bool]: ...


@runtime_checkable
class AnalyticsService(Protocol):
    def emit_event(self, category: str, action: str) -> None: ...
