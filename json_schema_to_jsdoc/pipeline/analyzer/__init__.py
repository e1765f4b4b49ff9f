"""
Analyzer module.

Resolves $ref pointers before the schema is parsed into an AST.
"""

from __future__ import annotations

from .reference_resolver import ReferenceResolver, dereference

__all__ = [
    "ReferenceResolver",
    "dereference",
]
