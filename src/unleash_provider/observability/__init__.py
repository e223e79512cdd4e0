"""
Observability module for the Unleash provider.

Provides structured logging with correlation IDs for lifecycle operations.
"""

from .logging import (
    ProviderLogger,
    get_correlation_id,
    set_correlation_id,
    setup_structured_logging,
)

__all__ = [
    "ProviderLogger",
    "get_correlation_id",
    "set_correlation_id",
    "setup_structured_logging",
]
