from enum import Enum


class UserRole(str, Enum):
    """User roles. Values are the wire strings used by API clients."""

    SYSTEM_ADMINISTRATOR = "System Administrator"
    NORMAL_USER = "Normal User"
    STORE_OWNER = "Store Owner"
