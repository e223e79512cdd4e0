"""
Base resource class providing common patterns for lifecycle calls.

This module defines the UnleashResource class that implements the standard
create/read/update/delete flow: input validation, operation logging, and
conversion of errors into diagnostics. Subclasses only map each lifecycle
call onto Unleash Admin API calls.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ProviderError
from ..framework import Diagnostics, LifecycleResult, ProviderData, Schema
from ..models.common import REMOTE_CONTEXT
from ..observability.logging import ProviderLogger

ModelT = TypeVar("ModelT", bound=BaseModel)


class UnleashResource(ABC, Generic[ModelT]):
    """
    Base class for all managed resources.

    Provides common patterns for:
    - Coercing raw attribute maps into the resource model
    - Logging every lifecycle call with duration
    - Turning ProviderError into diagnostics instead of raising
    - Refusing in-place updates of replace-only attributes
    """

    type_name: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def __init__(self, provider_data: ProviderData):
        """
        Initialize resource.

        Args:
            provider_data: Context carrying the shared Unleash Admin client
        """
        self.provider_data = provider_data
        self.logger = ProviderLogger(self.__class__.__name__)

    @property
    def client(self):
        return self.provider_data.client

    @classmethod
    @abstractmethod
    def schema(cls) -> Schema:
        """Declare the attributes of this resource."""

    @abstractmethod
    def identifier(self, model: ModelT) -> str | None:
        """Return the remote identifier tracked for this model."""

    @abstractmethod
    async def do_create(self, plan: ModelT, diagnostics: Diagnostics) -> ModelT:
        """Create the remote entity and return the state to track."""

    @abstractmethod
    async def do_read(self, state: ModelT, diagnostics: Diagnostics) -> ModelT | None:
        """Return refreshed state, or None if the remote entity is gone."""

    @abstractmethod
    async def do_update(
        self, plan: ModelT, state: ModelT, diagnostics: Diagnostics
    ) -> ModelT:
        """
        Apply changed attributes and return the state to track.

        Resources that need several calls record a failure in diagnostics
        and return the state reflecting the calls that succeeded.
        """

    @abstractmethod
    async def do_delete(self, state: ModelT, diagnostics: Diagnostics) -> None:
        """Delete the remote entity; an entity that is already gone is fine."""

    # Lifecycle entry points

    async def create(self, plan: ModelT | dict[str, Any]) -> LifecycleResult[ModelT]:
        diagnostics = Diagnostics()
        if isinstance(plan, dict):
            diagnostics.extend(self.schema().validate(plan))
        model = self._coerce(plan, diagnostics)
        if diagnostics.has_error or model is None:
            return LifecycleResult(None, diagnostics)

        return await self._run(
            "create",
            None,
            lambda: self.do_create(model, diagnostics),
            on_error=None,
            diagnostics=diagnostics,
        )

    async def read(self, state: ModelT | dict[str, Any]) -> LifecycleResult[ModelT]:
        diagnostics = Diagnostics()
        model = self._coerce(state, diagnostics, REMOTE_CONTEXT)
        if model is None:
            return LifecycleResult(None, diagnostics)

        return await self._run(
            "read",
            self.identifier(model),
            lambda: self.do_read(model, diagnostics),
            on_error=model,
            diagnostics=diagnostics,
        )

    async def update(
        self, plan: ModelT | dict[str, Any], state: ModelT | dict[str, Any]
    ) -> LifecycleResult[ModelT]:
        diagnostics = Diagnostics()
        if isinstance(plan, dict):
            # Planned values carry computed attributes over from state
            diagnostics.extend(self.schema().validate(plan, allow_computed=True))
        plan_model = self._coerce(plan, diagnostics)
        state_model = self._coerce(state, diagnostics, REMOTE_CONTEXT)
        if diagnostics.has_error or plan_model is None or state_model is None:
            return LifecycleResult(state_model, diagnostics)

        replaced = self.schema().requires_replace(
            plan_model.model_dump(), state_model.model_dump()
        )
        if replaced:
            diagnostics.add_error(
                "Attribute requires replacement",
                f"{', '.join(replaced)} cannot be updated in place; "
                f"the {self.type_name} must be recreated.",
            )
            return LifecycleResult(state_model, diagnostics)

        return await self._run(
            "update",
            self.identifier(state_model),
            lambda: self.do_update(plan_model, state_model, diagnostics),
            on_error=state_model,
            diagnostics=diagnostics,
        )

    async def delete(self, state: ModelT | dict[str, Any]) -> LifecycleResult[ModelT]:
        diagnostics = Diagnostics()
        model = self._coerce(state, diagnostics, REMOTE_CONTEXT)
        if model is None:
            return LifecycleResult(None, diagnostics)

        async def _delete() -> None:
            await self.do_delete(model, diagnostics)
            return None

        return await self._run(
            "delete",
            self.identifier(model),
            _delete,
            on_error=model,
            diagnostics=diagnostics,
        )

    # Helpers

    def _coerce(
        self,
        value: ModelT | dict[str, Any],
        diagnostics: Diagnostics,
        context: dict[str, Any] | None = None,
    ) -> ModelT | None:
        """Validate a raw attribute map; tracked state is validated as remote data."""
        if isinstance(value, self.model):
            return value  # type: ignore[return-value]
        try:
            return self.model.model_validate(  # type: ignore[return-value]
                value, context=context
            )
        except PydanticValidationError as e:
            diagnostics.add_error(f"Invalid {self.type_name} configuration", str(e))
            return None

    async def _run(
        self,
        operation: str,
        resource_id: str | None,
        call: Callable[[], Awaitable[ModelT | None]],
        on_error: ModelT | None,
        diagnostics: Diagnostics,
    ) -> LifecycleResult[ModelT]:
        """
        Run one lifecycle call with logging and error conversion.

        Args:
            operation: Lifecycle operation name
            resource_id: Remote identifier, when known
            call: The operation itself
            on_error: State to report when the call raises
            diagnostics: Collection shared with the call

        Returns:
            LifecycleResult with the resulting state and diagnostics
        """
        start_time = time.time()
        self.logger.log_operation_start(self.type_name, operation, resource_id)

        try:
            state = await call()
        except ProviderError as e:
            self.logger.log_operation_error(
                self.type_name, operation, resource_id, e, time.time() - start_time
            )
            diagnostics.append(
                e.as_diagnostic(f"Unable to {operation} {self.type_name}")
            )
            return LifecycleResult(on_error, diagnostics)
        except PydanticValidationError as e:
            # Server data that does not map onto the model
            self.logger.log_operation_error(
                self.type_name, operation, resource_id, e, time.time() - start_time
            )
            diagnostics.add_error(
                f"Unable to {operation} {self.type_name}",
                f"Unexpected data from the Unleash server: {e}",
            )
            return LifecycleResult(on_error, diagnostics)

        if diagnostics.has_error:
            self.logger.warning(
                f"{operation.capitalize()} of {self.type_name} {resource_id or ''} "
                f"finished with errors: {diagnostics.error_summary}",
                resource_type=self.type_name,
                operation=f"{operation}_partial",
            )
        else:
            self.logger.log_operation_success(
                self.type_name,
                operation,
                self.identifier(state) if state is not None else resource_id,
                time.time() - start_time,
            )
        return LifecycleResult(state, diagnostics)
