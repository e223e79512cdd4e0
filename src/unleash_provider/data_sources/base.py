"""
Base data source class for read-only lookups.

Data sources have no absence semantics: a lookup that finds nothing is an
error, because the configuration block requires the entity to exist.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ProviderError
from ..framework import Diagnostics, LifecycleResult, ProviderData, Schema
from ..observability.logging import ProviderLogger

ModelT = TypeVar("ModelT", bound=BaseModel)


class UnleashDataSource(ABC, Generic[ModelT]):
    """Base class for all data sources."""

    type_name: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def __init__(self, provider_data: ProviderData):
        self.provider_data = provider_data
        self.logger = ProviderLogger(self.__class__.__name__)

    @property
    def client(self):
        return self.provider_data.client

    @classmethod
    @abstractmethod
    def schema(cls) -> Schema:
        """Declare the lookup and result attributes of this data source."""

    @abstractmethod
    def lookup_key(self, config: ModelT) -> str:
        """Return the key the lookup is made by, for logs and errors."""

    @abstractmethod
    async def do_read(self, config: ModelT) -> ModelT:
        """
        Look up the remote entity and return the populated model.

        Raises:
            NotFoundError: If no entity matches the lookup key
            UnleashAPIError: If the lookup call fails
        """

    async def read(self, config: ModelT | dict[str, Any]) -> LifecycleResult[ModelT]:
        diagnostics = Diagnostics()
        if isinstance(config, dict):
            diagnostics.extend(self.schema().validate(config))
            if diagnostics.has_error:
                return LifecycleResult(None, diagnostics)
            try:
                config = self.model.model_validate(config)  # type: ignore[assignment]
            except PydanticValidationError as e:
                diagnostics.add_error(f"Invalid {self.type_name} configuration", str(e))
                return LifecycleResult(None, diagnostics)

        key = self.lookup_key(config)  # type: ignore[arg-type]
        start_time = time.time()
        self.logger.log_operation_start(self.type_name, "read", key)

        try:
            result = await self.do_read(config)  # type: ignore[arg-type]
        except ProviderError as e:
            self.logger.log_operation_error(
                self.type_name, "read", key, e, time.time() - start_time
            )
            diagnostics.append(e.as_diagnostic(f"Unable to read {self.type_name}"))
            return LifecycleResult(None, diagnostics)
        except PydanticValidationError as e:
            self.logger.log_operation_error(
                self.type_name, "read", key, e, time.time() - start_time
            )
            diagnostics.add_error(
                f"Unable to read {self.type_name}",
                f"Unexpected data from the Unleash server: {e}",
            )
            return LifecycleResult(None, diagnostics)

        self.logger.log_operation_success(
            self.type_name, "read", key, time.time() - start_time
        )
        return LifecycleResult(result, diagnostics)
