"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import ArrayNode, EnumNode, LeafNode, ObjectNode, SchemaNode
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "EnumNode",
    "ObjectNode",
    "ArrayNode",
    "LeafNode",
    "SchemaParser",
]
