"""
Data sources of the Unleash provider.

Read-only lookups of existing Unleash entities.
"""

from .base import UnleashDataSource
from .permission import PermissionDataSource
from .project import ProjectDataSource
from .role import RoleDataSource
from .user import UserDataSource

__all__ = [
    "UnleashDataSource",
    "UserDataSource",
    "ProjectDataSource",
    "PermissionDataSource",
    "RoleDataSource",
]
