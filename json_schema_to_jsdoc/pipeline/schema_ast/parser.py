"""
JSON Schema parser that builds an AST.

Takes an already dereferenced schema dictionary and classifies every
node once, so that later phases never look at raw keys again.
"""

from __future__ import annotations

from typing import Any

from .nodes import ArrayNode, EnumNode, LeafNode, ObjectNode, SchemaNode


class SchemaParser:
    """Parses a dereferenced JSON Schema into an AST."""

    def parse(self, schema: Any, path: str = "#") -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema dictionary (``$ref`` already resolved)
            path: Current path in schema, kept as the node's ``source_path``
                and reported in debug logging

        Returns:
            Appropriate SchemaNode subclass
        """
        if not isinstance(schema, dict) or not schema:
            return LeafNode(source_path=path, empty=True)

        common = self._extract_common(schema, path)

        # An enum is a closed value set whatever else the node declares
        if schema.get("enum") is not None:
            return EnumNode(values=list(schema["enum"]), **common)

        if "properties" in schema:
            return ObjectNode(**common)

        if schema.get("type") == "array":
            return ArrayNode(items=self._parse_items(schema.get("items"), path), **common)

        return LeafNode(**common)

    def _extract_common(self, schema: dict[str, Any], path: str) -> dict[str, Any]:
        """Extract the attributes shared by every node kind."""
        properties = {}
        raw_properties = schema.get("properties")
        if isinstance(raw_properties, dict):
            for prop_name, prop_schema in raw_properties.items():
                properties[prop_name] = self.parse(prop_schema, f"{path}/properties/{prop_name}")

        required = schema.get("required")
        type_value = schema.get("type")

        return {
            "type": list(type_value) if isinstance(type_value, list) else type_value,
            "description": schema.get("description"),
            "example": schema.get("example"),
            "properties": properties,
            "required": list(required) if isinstance(required, list) else [],
            "source_path": path,
        }

    def _parse_items(self, items_schema: Any, path: str) -> SchemaNode | list[SchemaNode] | None:
        """Parse array ``items`` (single schema or tuple form)."""
        if items_schema is None:
            return None
        if isinstance(items_schema, list):
            return [self.parse(item, f"{path}/items/{i}") for i, item in enumerate(items_schema)]
        return self.parse(items_schema, f"{path}/items")
