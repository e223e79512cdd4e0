"""
Constants used throughout the Unleash provider.

This module defines all constant values used by the provider including:
- Provider and resource type names
- Environment variable names used as configuration fallbacks
- Version compatibility thresholds
- Unleash Admin API endpoint paths
"""

# Provider identification
PROVIDER_TYPE_NAME = "unleash"

# Resource type names
RESOURCE_USER = f"{PROVIDER_TYPE_NAME}_user"
RESOURCE_PROJECT = f"{PROVIDER_TYPE_NAME}_project"
RESOURCE_ROLE = f"{PROVIDER_TYPE_NAME}_role"
RESOURCE_API_TOKEN = f"{PROVIDER_TYPE_NAME}_api_token"
RESOURCE_PROJECT_ACCESS = f"{PROVIDER_TYPE_NAME}_project_access"

# Data source type names
DATA_SOURCE_USER = f"{PROVIDER_TYPE_NAME}_user"
DATA_SOURCE_PROJECT = f"{PROVIDER_TYPE_NAME}_project"
DATA_SOURCE_PERMISSION = f"{PROVIDER_TYPE_NAME}_permission"
DATA_SOURCE_ROLE = f"{PROVIDER_TYPE_NAME}_role"

# Environment variables used when a provider attribute is not configured
ENV_BASE_URL = "UNLEASH_URL"
ENV_AUTHORIZATION = "AUTH_TOKEN"
ENV_LOG_LEVEL = "TF_LOG"

# TF_LOG values that enable request/response tracing
VERBOSE_LOG_LEVELS = frozenset({"debug", "trace"})

# Minimum supported Unleash server version (inclusive, pre-releases accepted)
MINIMUM_UNLEASH_VERSION = "5.6.0"

# Default HTTP settings
DEFAULT_REQUEST_TIMEOUT = 60
BODY_PREVIEW_LIMIT = 1024

# Unleash Admin API paths (relative to the configured base URL)
UI_CONFIG_PATH = "api/admin/ui-config"
USERS_PATH = "api/admin/users"
PROJECTS_PATH = "api/admin/projects"
ROLES_PATH = "api/admin/roles"
PERMISSIONS_PATH = "api/admin/permissions"
API_TOKENS_PATH = "api/admin/api-tokens"

# Role types accepted by the roles API
ROLE_TYPE_ROOT_CUSTOM = "root-custom"
ROLE_TYPE_CUSTOM = "custom"
ROLE_TYPES = (ROLE_TYPE_ROOT_CUSTOM, ROLE_TYPE_CUSTOM)

# API token types
API_TOKEN_TYPES = ("client", "frontend", "admin")
ALL_PROJECTS = "*"

# Value shown in logs instead of sensitive attributes
REDACTED = "<redacted>"
