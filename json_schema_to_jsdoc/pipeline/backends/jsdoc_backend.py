"""
JSDoc backend.

Renders schema nodes as JSDoc ``@typedef`` comment blocks. Nested object
properties are flattened into dotted ``@property`` paths
(``location.street``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import jinja2

from ...utils import js_string, js_truthy, upper_first
from ..config import JSDocGeneratorConfig
from ..schema_ast import EnumNode, ObjectNode, SchemaNode, SchemaParser
from .base import DocBackend

logger = logging.getLogger(__name__)

LogCallback = Callable[[str], None]


def _no_log(_message: str) -> None:
    pass


@dataclass
class FieldAnnotation:
    """One ``@property`` line of a typedef."""

    type: str
    field_name: str
    description: str = ""
    optional: bool = False

    def render(self) -> str:
        field = f"[{self.field_name}]" if self.optional else self.field_name
        return f" * @property {{{self.type}}} {field} - {self.description} \n"


class JSDocBackend(DocBackend):
    """Generates JSDoc typedef blocks."""

    TEMPLATE_LANG = "jsdoc"
    FILE_EXTENSION = "js"

    def __init__(self, config: JSDocGeneratorConfig | None = None, log: LogCallback | None = None):
        """
        Initialize the backend.

        Args:
            config: Generation configuration
            log: Receives a line for every visited property; never
                influences the rendered text
        """
        super().__init__(config or JSDocGeneratorConfig())
        self.log = log or _no_log
        self.parser = SchemaParser()
        self._ignored = [self.parser.parse(value) for value in self.config.ignore]

    def _register_filters(self, env: jinja2.Environment) -> None:
        env.filters["jsdoc_type"] = lambda type_expr: "{" + type_expr + "}"

    def generate_component(
        self,
        component_schema: Any,
        name: str,
        ignore: list[Any] | None = None,
    ) -> str:
        """
        Generate a JSDoc typedef for the given (dereferenced) schema.

        Args:
            component_schema: A SchemaNode or a raw schema dictionary
            name: The name of the typedef
            ignore: Schema values to skip among the node's properties;
                defaults to the configured ``ignore`` list

        Returns:
            The typedef block, or "" for an empty schema
        """
        node = self._as_node(component_schema)
        if node is None or node.is_empty():
            return ""
        if isinstance(node, EnumNode):
            return self.process_enum_schema(node, name)

        ignored = self._ignored if ignore is None else [self._as_node(value) for value in ignore]
        return self.typedef_template.render(
            TYPEDEF_NAME=name,
            DESCRIPTION=node.description or "",
            PROPERTIES=self.process_properties(node, ignored),
        )

    def process_properties(self, node: SchemaNode, ignore: list[SchemaNode] | None = None) -> str:
        """
        Return the ``@property`` lines for the properties of *node*.

        Sub-properties of nested objects are emitted after their parent,
        keyed by dotted path. Nested ``required`` lists are not consulted,
        so every nested field is optional.
        """
        text = ""

        # Flattening rewrites keys on these copies only
        properties = {key: prop.clone() for key, prop in node.properties.items()}
        required = node.required

        for key, prop in properties.items():
            self.log(f"--{key}")

            if ignore and prop in ignore:
                logger.debug("Ignoring %s", prop.source_path)
                continue

            if prop.properties:
                dotted = {}
                for sub_key, sub_prop in prop.properties.items():
                    self.log(f"----{sub_key}")
                    dotted[f"{key}.{sub_key}"] = sub_prop
                prop.properties = dotted

            if isinstance(prop, ObjectNode) and prop.type == "object" and prop.properties:
                text += FieldAnnotation("object", key, prop.description or "", optional=True).render()
                text += self.process_properties(prop)
                continue

            description = prop.description
            if not description and js_truthy(prop.example):
                description = "Example: " + js_string(prop.example)

            text += FieldAnnotation(
                type=self.get_type(prop) or upper_first(key),
                field_name=key,
                description="" if description is None else js_string(description),
                optional=key not in required,
            ).render()

        return text

    def process_enum_schema(self, node: EnumNode, name: str) -> str:
        """Generate a standalone typedef for an enumeration."""
        return self.enum_template.render(
            ENUM_TYPE=self.generate_enums(node.values),
            TYPEDEF_NAME=name,
            DESCRIPTION=node.description or "",
        )

    def get_type(self, node: SchemaNode) -> str | None:
        """Return the JSDoc type expression for *node*, or None."""
        if isinstance(node, EnumNode):
            return self.generate_enums(node.values)

        if isinstance(node.type, list):
            # Only the first entry is used for the nullable shorthand
            if "null" in node.type:
                return "?" + js_string(node.type[0])
            return "|".join(js_string(t) for t in node.type)

        return node.type

    def generate_enums(self, values: list[Any]) -> str:
        """
        Return a union of quoted literals, e.g. ``"a"|"b"|"c"``.

        Enumerations larger than the configured threshold are rendered as
        ``string`` to keep the typedef readable.
        """
        if len(values) > self.config.enum_string_threshold:
            return "string"
        return "|".join(f'"{js_string(value)}"' for value in values)

    def _as_node(self, schema: Any) -> SchemaNode | None:
        if schema is None or isinstance(schema, SchemaNode):
            return schema
        return self.parser.parse(schema)
