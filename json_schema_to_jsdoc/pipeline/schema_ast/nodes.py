"""
AST (Abstract Syntax Tree) node definitions for JSON Schema.

These nodes represent a dereferenced JSON Schema as a tagged tree:
each node is classified once, when parsed, as an enum, an object,
an array or a leaf. The renderer dispatches on the node class
instead of re-inspecting raw schema keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # "string", ["string", "null"], ... or None when the schema has no type
    type: str | list[str] | None = None

    description: str | None = None
    example: Any = None

    # Child nodes keyed by property name, in schema order
    properties: dict[str, SchemaNode] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)

    # Location in the source schema, e.g. "#/properties/name"
    source_path: str = field(default="", compare=False)

    def clone(self) -> SchemaNode:
        """Return a structural deep copy of this node."""
        return self.__class__(**self._clone_fields())

    def _clone_fields(self) -> dict[str, Any]:
        return {
            "type": list(self.type) if isinstance(self.type, list) else self.type,
            "description": self.description,
            "example": _clone_value(self.example),
            "properties": {name: child.clone() for name, child in self.properties.items()},
            "required": list(self.required),
            "source_path": self.source_path,
        }

    def is_empty(self) -> bool:
        """True for a node parsed from an empty schema (``{}``)."""
        return False


@dataclass
class EnumNode(SchemaNode):
    """Represents a closed set of literal values."""

    values: list[Any] = field(default_factory=list)

    def _clone_fields(self) -> dict[str, Any]:
        fields = super()._clone_fields()
        fields["values"] = [_clone_value(value) for value in self.values]
        return fields


@dataclass
class ObjectNode(SchemaNode):
    """Represents a schema that declares ``properties``."""


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: SchemaNode | list[SchemaNode] | None = None

    def _clone_fields(self) -> dict[str, Any]:
        fields = super()._clone_fields()
        if isinstance(self.items, list):
            fields["items"] = [item.clone() for item in self.items]
        elif self.items is not None:
            fields["items"] = self.items.clone()
        return fields


@dataclass
class LeafNode(SchemaNode):
    """Represents anything else: primitives, untyped or empty schemas."""

    # Whether the source schema had no keys at all
    empty: bool = False

    def _clone_fields(self) -> dict[str, Any]:
        fields = super()._clone_fields()
        fields["empty"] = self.empty
        return fields

    def is_empty(self) -> bool:
        return self.empty


def _clone_value(value: Any) -> Any:
    """Copy a JSON literal (example or enum value)."""
    if isinstance(value, dict):
        return {k: _clone_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_clone_value(v) for v in value]
    return value
