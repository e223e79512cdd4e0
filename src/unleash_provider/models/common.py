"""Shared helpers for resource and data source models."""

from pydantic import ValidationInfo

# Validation context for values reported by the Unleash server. Allow-lists
# on configured input do not apply to them.
REMOTE_CONTEXT = {"remote": True}


def is_remote(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("remote"))
