"""
Framework primitives shared by the provider, resources and data sources.

Contains:
- Diagnostics: aggregated errors and warnings per operation
- Schema and Attribute declarations
- ProviderData context and LifecycleResult
"""

from .diagnostics import Diagnostic, Diagnostics, Severity
from .lifecycle import LifecycleResult, ProviderData
from .schema import Attribute, AttributeType, Schema

__all__ = [
    "Attribute",
    "AttributeType",
    "Diagnostic",
    "Diagnostics",
    "LifecycleResult",
    "ProviderData",
    "Schema",
    "Severity",
]
