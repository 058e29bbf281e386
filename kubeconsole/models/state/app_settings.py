"""User settings models."""

from pydantic import BaseModel, ConfigDict, Field

from kubeconsole.constants.defaults import (
    ITEMS_PER_PAGE_DEFAULT,
    PROJECT_ID_DEFAULT,
    USER_EMAIL_DEFAULT,
    USER_GROUP_DEFAULT,
    USER_NAME_DEFAULT,
)
from kubeconsole.constants.limits import ITEMS_PER_PAGE_MAX, ITEMS_PER_PAGE_MIN


class UserSettings(BaseModel):
    """User settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Pagination
    items_per_page: int = Field(
        default=ITEMS_PER_PAGE_DEFAULT,
        ge=ITEMS_PER_PAGE_MIN,
        le=ITEMS_PER_PAGE_MAX,
        alias="itemsPerPage",
    )

    # Identity
    user_name: str = USER_NAME_DEFAULT
    user_email: str = USER_EMAIL_DEFAULT
    user_group: str = USER_GROUP_DEFAULT
    project_groups: dict[str, str] = {}  # project id -> group name override

    # Cluster selection
    default_project_id: str = PROJECT_ID_DEFAULT
    context: str = ""


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
