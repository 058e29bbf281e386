"""Limit and threshold constants for the console.

All validation ranges for persisted settings.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

ITEMS_PER_PAGE_MIN: Final = 1
ITEMS_PER_PAGE_MAX: Final = 100

__all__ = [
    "ITEMS_PER_PAGE_MAX",
    "ITEMS_PER_PAGE_MIN",
]
