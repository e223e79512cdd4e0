"""
Managed resources of the Unleash provider.

Each resource maps the create/read/update/delete lifecycle of one Unleash
entity type onto the shared Unleash Admin client.
"""

from .api_token import ApiTokenResource
from .base import UnleashResource
from .project import ProjectResource
from .project_access import ProjectAccessResource
from .role import RoleResource
from .user import UserResource

__all__ = [
    "UnleashResource",
    "UserResource",
    "ProjectResource",
    "ApiTokenResource",
    "RoleResource",
    "ProjectAccessResource",
]
