"""Default values for settings.

All default values used in the UserSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Pagination defaults
# ============================================================================

ITEMS_PER_PAGE_DEFAULT: Final = 10

# ============================================================================
# User defaults
# ============================================================================

USER_NAME_DEFAULT: Final = "admin"
USER_EMAIL_DEFAULT: Final = ""
USER_GROUP_DEFAULT: Final = "owners"
PROJECT_ID_DEFAULT: Final = "default"

__all__ = [
    "ITEMS_PER_PAGE_DEFAULT",
    "PROJECT_ID_DEFAULT",
    "USER_EMAIL_DEFAULT",
    "USER_GROUP_DEFAULT",
    "USER_NAME_DEFAULT",
]
