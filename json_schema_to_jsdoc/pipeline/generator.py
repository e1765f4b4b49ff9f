"""
Pipeline generator.

Drives the phases: dereference the raw schema, parse it into an AST,
render one typedef per top-level property and write the result.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .analyzer import dereference
from .backends import JSDocBackend
from .backends.jsdoc_backend import LogCallback
from .config import JSDocGeneratorConfig, OutputMode
from .schema_ast import SchemaNode, SchemaParser
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


def load_schema(path: str | Path) -> dict[str, Any]:
    """Read a JSON Schema document from *path*."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class PipelineGenerator:
    """Generates a JSDoc module from a JSON Schema."""

    def __init__(
        self,
        schema: dict[str, Any],
        config: JSDocGeneratorConfig | None = None,
        base_path: str | Path | None = None,
        log: LogCallback | None = None,
    ):
        """
        Initialize the generator.

        Args:
            schema: The raw JSON Schema (may contain $ref)
            config: Generation configuration
            base_path: File the schema was read from, for relative $ref
            log: Optional callback receiving a line per visited property
        """
        self.raw_schema = schema
        self.config = config or JSDocGeneratorConfig()
        self.base_path = base_path
        self.backend = JSDocBackend(self.config, log=log)
        self._schema: dict[str, Any] | None = None

    @property
    def schema(self) -> dict[str, Any]:
        """The dereferenced schema, resolved on first access."""
        if self._schema is None:
            self._schema = dereference(self.raw_schema, self.base_path)
        return self._schema

    def parse(self) -> SchemaNode:
        """Parse the dereferenced schema into an AST."""
        return SchemaParser().parse(self.schema)

    def generate(self) -> str:
        """
        Generate the JSDoc module text.

        Returns:
            Typedef blocks and placeholder declarations for every top-level
            property, followed by a single export statement
        """
        root = self.parse()

        parts = []
        exports = []
        for property_key, property_node in root.properties.items():
            self.backend.log(property_key)

            if property_key in self.config.skip_properties:
                continue

            typedef_name = property_key + self.config.typedef_suffix
            logger.debug("Rendering %s from %s", typedef_name, property_node.source_path)
            parts.append(self.backend.generate_component(property_node, typedef_name))
            parts.append(self.backend.render_declaration(typedef_name, property_key))
            exports.append(property_key)

        parts.append(self.backend.render_suffix(exports))
        return "".join(parts)

    def check_output(self, output_path: str | Path) -> None:
        """
        Refuse an existing *output_path* in ERROR_IF_EXISTS mode.

        Raises:
            FileExistsError: In ERROR_IF_EXISTS mode when the file exists
        """
        path = Path(output_path)
        if self.config.output.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

    def generate_file(self, output_path: str | Path) -> str:
        """
        Generate the JSDoc module and write it to *output_path*.

        Returns:
            The generated text

        Raises:
            FileExistsError: In ERROR_IF_EXISTS mode when the file exists
            OutputWriteError: If the output fails validation
        """
        output = self.generate()
        path = Path(output_path)
        output_config = self.config.output
        validate = output_config.validate_before_write

        self.check_output(path)

        writer = AtomicWriter()
        if output_config.atomic_write:
            writer.write(path, output, validate=validate)
        else:
            if validate:
                writer.validate(output)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(output, encoding="utf-8", newline="")

        logger.debug("Wrote %s", path)
        return output


def generate_file(
    schema_path: str | Path,
    output_path: str | Path,
    config: JSDocGeneratorConfig | None = None,
    log: LogCallback | None = None,
) -> str:
    """
    Convert the JSON Schema file at *schema_path* into a JSDoc module.

    Returns:
        The generated text
    """
    generator = PipelineGenerator(load_schema(schema_path), config, base_path=schema_path, log=log)
    return generator.generate_file(output_path)
