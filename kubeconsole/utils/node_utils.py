"""Display helpers for node records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kubeconsole.constants.enums import CloudProvider
from kubeconsole.constants.values import MACHINE_ID_PREFIX
from kubeconsole.models.core.node_info import Node
from kubeconsole.utils.resource_parser import format_memory

_ADDRESS_ORDER = ("InternalIP", "ExternalIP", "InternalDNS", "ExternalDNS", "Hostname")


def strip_machine_prefix(node_id: str) -> str:
    """Strip the leading ``machine-`` prefix from a node id, if present."""
    if node_id.startswith(MACHINE_ID_PREFIX):
        return node_id[len(MACHINE_ID_PREFIX):]
    return node_id


def get_formatted_node_memory(memory: str) -> str:
    return format_memory(memory)


def get_addresses(node: Node) -> dict[str, str]:
    """Group node addresses by type.

    Known address types come first in a fixed order, unknown types follow in
    the order reported. Multiple addresses of one type are comma-joined.
    """
    grouped: dict[str, list[str]] = {}
    for entry in node.status.addresses:
        if entry.address:
            grouped.setdefault(entry.type, []).append(entry.address)

    ordered_types = [t for t in _ADDRESS_ORDER if t in grouped]
    ordered_types.extend(t for t in grouped if t not in _ADDRESS_ORDER)
    return {address_type: ", ".join(grouped[address_type]) for address_type in ordered_types}


def get_operating_system(node: Node) -> str:
    """Return the display name of the node's operating system, or ``""``."""
    operating_system = node.spec.operating_system.name
    if operating_system is None:
        return ""
    return _OS_DISPLAY_NAMES.get(operating_system.value, operating_system.value)


def get_operating_system_logo_class(node: Node) -> str:
    operating_system = node.spec.operating_system.name
    if operating_system is None:
        return ""
    return f"km-os-image-{operating_system.value}"


def is_aws_node(node: Node) -> bool:
    return node.spec.cloud.provider == CloudProvider.AWS


def has_tags(tags: Mapping[str, Any] | None) -> bool:
    return bool(tags)


_OS_DISPLAY_NAMES: dict[str, str] = {
    "ubuntu": "Ubuntu",
    "centos": "CentOS",
    "flatcar": "Flatcar",
    "rhel": "RHEL",
    "sles": "SLES",
    "amzn2": "Amazon Linux 2",
    "rockylinux": "Rocky Linux",
}
