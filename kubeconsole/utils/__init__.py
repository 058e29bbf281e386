"""Utility functions for parsing and display formatting."""

from kubeconsole.utils.member_utils import has_permission
from kubeconsole.utils.resource_parser import format_memory, memory_str_to_bytes, parse_cpu
from kubeconsole.utils.versions import VersionKey, parse_version

__all__ = [
    "VersionKey",
    "format_memory",
    "has_permission",
    "memory_str_to_bytes",
    "parse_cpu",
    "parse_version",
]
