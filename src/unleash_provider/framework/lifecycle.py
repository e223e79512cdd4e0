"""
Shared context and result types for resource and data source lifecycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel

from unleash_provider.framework.diagnostics import Diagnostics

if TYPE_CHECKING:
    from unleash_provider.utils.unleash_admin import UnleashAdminClient

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class ProviderData:
    """
    Context handed to every resource and data source constructor.

    Owned by the provider for one configuration; resources and data sources
    only hold a reference to it.
    """

    client: UnleashAdminClient


@dataclass
class LifecycleResult(Generic[ModelT]):
    """
    Outcome of one lifecycle call.

    ``state`` is the model the host should track afterwards. None means the
    entity is not (or no longer) managed: after a failed create, a read of an
    entity that disappeared, or a delete.
    """

    state: ModelT | None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def has_error(self) -> bool:
        return self.diagnostics.has_error
