"""
Base class for documentation backends.

Defines the template plumbing shared by text backends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..config import JSDocGeneratorConfig
from ..schema_ast import SchemaNode


class DocBackend(ABC):
    """Abstract base class for typedef-rendering backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: JSDocGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self._register_filters(self.jinja_env)

        self.typedef_template = self.jinja_env.get_template(f"typedef.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.declaration_template = self.jinja_env.get_template(f"declaration.{self.FILE_EXTENSION}.jinja2")
        self.suffix_template = self.jinja_env.get_template(f"suffix.{self.FILE_EXTENSION}.jinja2")

    def _register_filters(self, env: jinja2.Environment) -> None:
        """Hook for subclasses to add custom template filters."""

    @abstractmethod
    def generate_component(self, component_schema: Any, name: str) -> str:
        """
        Render the typedef block for one schema node.

        Args:
            component_schema: The (dereferenced) schema node
            name: Name of the typedef

        Returns:
            Typedef text, possibly empty
        """

    @abstractmethod
    def get_type(self, node: SchemaNode) -> str | None:
        """
        Translate a schema node to a type expression.

        Args:
            node: The schema node

        Returns:
            Type expression, or None when the node carries no type
        """

    def render_declaration(self, typedef_name: str, element_name: str) -> str:
        """Render the placeholder variable annotated with *typedef_name*."""
        return self.declaration_template.render(TYPEDEF_NAME=typedef_name, ELEMENT_NAME=element_name)

    def render_suffix(self, exports: list[str]) -> str:
        """Render the closing export statement."""
        return self.suffix_template.render(EXPORTS=exports)
