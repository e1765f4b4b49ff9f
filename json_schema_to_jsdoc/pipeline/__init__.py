"""
Pipeline - JSON Schema to JSDoc generator.

This module generates JSDoc typedef modules from JSON schemas in phases:

1. Phase 1 (Analyzer): Inline every $ref
2. Phase 2 (Parser): Parse the resolved schema into a tagged Schema AST
3. Phase 3 (Backend): Render typedef blocks, declarations and exports
4. Phase 4 (Writer): Validate and atomically write the result
"""

from __future__ import annotations

from .analyzer import ReferenceResolver, dereference
from .backends import JSDocBackend
from .config import JSDocGeneratorConfig, OutputConfig, OutputMode
from .errors import DereferenceError, JSDocError, OutputWriteError
from .generator import PipelineGenerator, generate_file, load_schema
from .schema_ast import SchemaParser
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "JSDocBackend",
    "SchemaParser",
    "ReferenceResolver",
    "dereference",
    "generate_file",
    "load_schema",
    "JSDocGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "JSDocError",
    "DereferenceError",
    "OutputWriteError",
    "AtomicWriter",
]
