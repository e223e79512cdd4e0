"""
Utils package - Utility modules for Unleash provider functionality.

Contains helper modules for:
- Unleash Admin API interactions
"""

from unleash_provider.utils.unleash_admin import (
    UnleashAdminClient,
    create_unleash_client,
)

__all__ = [
    "UnleashAdminClient",
    "create_unleash_client",
]
