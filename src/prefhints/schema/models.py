"""Pydantic models for preference descriptors and schema entries.

``PreferenceDefinition`` validates one raw descriptor as the host's
preference system reports it (``type``, ``description``, ``keys``,
``values``, ``valueType``, ``excludeFromHints``). ``SchemaEntry`` is the
normalised, immutable form the registry hands to the resolvers.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from prefhints.domain.types import ValueType

AllowedValue = Union[str, int, float]


class PreferenceDefinition(BaseModel):
    """A raw preference descriptor."""

    type: ValueType = Field(default=ValueType.NONE, description="Declared value type")
    description: Optional[str] = Field(default=None, description="Human readable description")
    keys: Optional[dict[str, "PreferenceDefinition"]] = Field(
        default=None, description="Nested key schema for object preferences"
    )
    values: Optional[list[AllowedValue]] = Field(default=None, description="Allowed values")
    value_type: Optional[ValueType] = Field(
        default=None, alias="valueType", description="Element type for array preferences"
    )
    exclude_from_hints: bool = Field(default=False, alias="excludeFromHints")

    @field_validator("type", mode="before")
    @classmethod
    def _lenient_type(cls, raw: Any) -> ValueType:
        return ValueType.parse(raw)

    @field_validator("value_type", mode="before")
    @classmethod
    def _lenient_value_type(cls, raw: Any) -> Optional[ValueType]:
        if raw is None:
            return None
        return ValueType.parse(raw)

    class Config:
        """Pydantic configuration."""

        populate_by_name = True
        extra = "ignore"


class SchemaEntry(BaseModel):
    """Registry metadata for one preference key.

    ``children`` is only kept for object entries. ``item_type`` is the
    element type of array entries.
    """

    key: str
    value_type: ValueType = ValueType.NONE
    description: Optional[str] = None
    children: Optional[dict[str, "SchemaEntry"]] = None
    allowed_values: Optional[tuple[AllowedValue, ...]] = None
    item_type: Optional[ValueType] = None

    @model_validator(mode="after")
    def _children_only_on_objects(self) -> "SchemaEntry":
        if self.children is not None and self.value_type is not ValueType.OBJECT:
            raise ValueError(f"'{self.key}' declares nested keys but is not an object")
        return self

    @classmethod
    def from_definition(cls, key: str, definition: PreferenceDefinition) -> "SchemaEntry":
        """Convert a descriptor, recursively converting its nested keys."""
        children = None
        if definition.keys is not None and definition.type is ValueType.OBJECT:
            children = {
                child_key: cls.from_definition(child_key, child)
                for child_key, child in definition.keys.items()
            }
        return cls(
            key=key,
            value_type=definition.type,
            description=definition.description,
            children=children,
            allowed_values=tuple(definition.values) if definition.values is not None else None,
            item_type=definition.value_type,
        )

    @property
    def element_type(self) -> ValueType:
        """Type of individual values: the item type when declared, else the entry type."""
        return self.item_type or self.value_type

    class Config:
        """Pydantic configuration."""

        frozen = True


PreferenceDefinition.model_rebuild()
SchemaEntry.model_rebuild()
