"""
Attribute schemas for the provider, its resources and its data sources.

A schema declares which attributes a configuration block accepts and how the
host must treat them: required or optional, computed by the server,
sensitive, or forcing replacement when changed because the remote API offers
no way to update them in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from unleash_provider.constants import REDACTED
from unleash_provider.framework.diagnostics import Diagnostics


class AttributeType(Enum):
    """Value types an attribute can hold."""

    STRING = "string"
    INT64 = "int64"
    BOOL = "bool"
    LIST = "list"
    SET = "set"


@dataclass(frozen=True)
class Attribute:
    """Declaration of a single attribute."""

    type: AttributeType
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    requires_replace: bool = False
    default: Any = None
    element_type: AttributeType | None = None
    # Nested attributes for list/set of objects
    attributes: dict[str, Attribute] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.required and (self.optional or self.computed):
            raise ValueError("A required attribute cannot be optional or computed")
        if not (self.required or self.optional or self.computed):
            raise ValueError(
                "An attribute must be required, optional or computed"
            )

    @property
    def configurable(self) -> bool:
        return self.required or self.optional


@dataclass(frozen=True)
class Schema:
    """Attribute set of a provider, resource or data source block."""

    attributes: dict[str, Attribute]
    description: str = ""

    def validate(
        self, config: dict[str, Any], allow_computed: bool = False
    ) -> Diagnostics:
        """
        Check a raw configuration block against the schema.

        Args:
            config: Attribute values as written by the operator
            allow_computed: Accept values on computed-only attributes, as in
                update plans that carry them over from state

        Returns:
            Diagnostics with one error per missing required attribute,
            unknown attribute, or value set on a computed-only attribute
        """
        diagnostics = Diagnostics()

        for name, attribute in self.attributes.items():
            value = config.get(name)
            if attribute.required and value is None:
                diagnostics.add_error(
                    "Missing required argument",
                    f'The argument "{name}" is required, but no definition was found.',
                )
            elif (
                value is not None
                and not attribute.configurable
                and not allow_computed
            ):
                diagnostics.add_error(
                    "Invalid configuration for read-only attribute",
                    f'"{name}" is computed by the server and cannot be set.',
                )

        for name in config:
            if name not in self.attributes:
                diagnostics.add_error(
                    "Unsupported argument",
                    f'An argument named "{name}" is not expected here.',
                )

        return diagnostics

    def requires_replace(
        self, plan: dict[str, Any], state: dict[str, Any]
    ) -> list[str]:
        """
        List changed attributes that cannot be updated in place.

        An unset optional+computed attribute keeps its prior value, so it
        never counts as changed.
        """
        return [
            name
            for name, attribute in self.attributes.items()
            if attribute.requires_replace
            and attribute.configurable
            and not (attribute.computed and plan.get(name) is None)
            and plan.get(name) != state.get(name)
        ]

    def redact(self, values: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of values with sensitive attributes masked for logging."""
        redacted = {}
        for name, value in values.items():
            attribute = self.attributes.get(name)
            if attribute is not None and attribute.sensitive and value is not None:
                redacted[name] = REDACTED
            else:
                redacted[name] = value
        return redacted
