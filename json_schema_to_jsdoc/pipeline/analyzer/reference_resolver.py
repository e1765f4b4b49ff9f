"""
Reference resolver for $ref resolution.

Inlines every $ref of a raw JSON Schema so that the rest of the
pipeline only ever sees a plain, acyclic tree.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import unquote

from ..errors import DereferenceError

logger = logging.getLogger(__name__)

# (document path or "" for the in-memory root, JSON pointer)
RefKey = tuple[str, str]


class ReferenceResolver:
    """Resolves $ref to copies of their targets."""

    def __init__(self, schema: dict[str, Any], base_path: str | Path | None = None):
        """
        Initialize the resolver.

        Args:
            schema: The raw schema dictionary
            base_path: File the schema was read from; relative file
                references are resolved against its directory
        """
        self.schema = schema
        self.base_path = Path(base_path).resolve() if base_path is not None else None
        self._documents: dict[Path, Any] = {}

    def dereference(self) -> dict[str, Any]:
        """Return a new schema with all references inlined."""
        return self._resolve(self.schema, self.schema, self.base_path, ())

    def _resolve(self, value: Any, document: Any, doc_path: Path | None, stack: tuple[RefKey, ...]) -> Any:
        if isinstance(value, list):
            return [self._resolve(item, document, doc_path, stack) for item in value]
        if not isinstance(value, dict):
            return value
        if isinstance(value.get("$ref"), str):
            return self._resolve_ref(value, document, doc_path, stack)
        return {key: self._resolve(item, document, doc_path, stack) for key, item in value.items()}

    def _resolve_ref(self, node: dict[str, Any], document: Any, doc_path: Path | None, stack: tuple[RefKey, ...]) -> Any:
        """Resolve a single {"$ref": ...} object, merging any sibling keys."""
        ref = node["$ref"]
        target_doc, target_path, pointer = self._locate(ref, document, doc_path)

        key = (str(target_path) if target_path else "", pointer)
        if key in stack:
            chain = " -> ".join(f"{path}#{ptr}" for path, ptr in (*stack, key))
            raise DereferenceError(f"Circular $ref '{ref}': {chain}")

        target = self._follow_pointer(target_doc, pointer, ref)
        logger.debug("Resolved $ref %s", ref)
        resolved = self._resolve(target, target_doc, target_path, (*stack, key))

        siblings = {k: v for k, v in node.items() if k != "$ref"}
        if siblings and isinstance(resolved, dict):
            resolved = {**resolved, **self._resolve(siblings, document, doc_path, stack)}
        return resolved

    def _locate(self, ref: str, document: Any, doc_path: Path | None) -> tuple[Any, Path | None, str]:
        """Split a reference into (target document, its path, JSON pointer)."""
        file_part, _, fragment = ref.partition("#")
        if not file_part:
            return document, doc_path, fragment

        if "://" in file_part:
            raise DereferenceError(f"Remote $ref is not supported: '{ref}'")

        base_dir = doc_path.parent if doc_path is not None else Path.cwd()
        target_path = (base_dir / unquote(file_part)).resolve()
        return self._load_document(target_path, ref), target_path, fragment

    def _load_document(self, path: Path, ref: str) -> Any:
        """Load (and cache) an external schema document."""
        if path not in self._documents:
            try:
                with open(path, encoding="utf-8") as f:
                    self._documents[path] = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise DereferenceError(f"Cannot load '{path}' for $ref '{ref}': {e}") from e
        return self._documents[path]

    def _follow_pointer(self, document: Any, pointer: str, ref: str) -> Any:
        """Walk a JSON pointer ("/definitions/Foo") inside *document*."""
        if not pointer:
            return document
        if not pointer.startswith("/"):
            raise DereferenceError(f"Invalid JSON pointer in $ref '{ref}'")

        current = document
        for raw_token in pointer[1:].split("/"):
            token = unquote(raw_token).replace("~1", "/").replace("~0", "~")
            if isinstance(current, dict) and token in current:
                current = current[token]
            elif isinstance(current, list) and token.isdigit() and int(token) < len(current):
                current = current[int(token)]
            else:
                raise DereferenceError(f"Cannot resolve $ref '{ref}': no '{token}' in target")
        return current


def dereference(schema: dict[str, Any], base_path: str | Path | None = None) -> dict[str, Any]:
    """
    Inline every $ref of *schema*.

    Args:
        schema: The raw schema dictionary (not modified)
        base_path: File the schema was read from, for relative file references

    Returns:
        A new dictionary with all references replaced by their targets

    Raises:
        DereferenceError: If a reference is missing, unreadable or circular
    """
    return ReferenceResolver(schema, base_path).dereference()
