"""Constants module for KubeConsole.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, permission tables)
- timeouts.py: Timeout values (seconds)
- limits.py: Validation ranges
- defaults.py: Default values for settings
"""

from kubeconsole.constants.defaults import (
    ITEMS_PER_PAGE_DEFAULT,
    PROJECT_ID_DEFAULT,
    USER_GROUP_DEFAULT,
)
from kubeconsole.constants.enums import (
    Column,
    NodeHealthState,
    Permission,
    SortDirection,
    SortField,
)
from kubeconsole.constants.limits import ITEMS_PER_PAGE_MAX, ITEMS_PER_PAGE_MIN
from kubeconsole.constants.timeouts import (
    CLUSTER_CHECK_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubeconsole.constants.values import (
    APP_TITLE,
    COPY_CONTROL_CLASS,
    MACHINE_ID_PREFIX,
    RESOURCE_NODES,
)

__all__ = [
    "APP_TITLE",
    "CLUSTER_CHECK_TIMEOUT",
    "COPY_CONTROL_CLASS",
    "ITEMS_PER_PAGE_DEFAULT",
    "ITEMS_PER_PAGE_MAX",
    "ITEMS_PER_PAGE_MIN",
    "KUBECTL_COMMAND_TIMEOUT",
    "MACHINE_ID_PREFIX",
    "PROJECT_ID_DEFAULT",
    "RESOURCE_NODES",
    "USER_GROUP_DEFAULT",
    "Column",
    "NodeHealthState",
    "Permission",
    "SortDirection",
    "SortField",
]
