"""JSON Schema to JSDoc Generator

A Python package for generating JSDoc typedef modules from JSON Schema
definitions, with $ref dereferencing, nested property flattening and
atomic output writing.
"""

__version__ = "0.1.0"

from .pipeline import (
    AtomicWriter,
    DereferenceError,
    JSDocBackend,
    JSDocError,
    JSDocGeneratorConfig,
    OutputConfig,
    OutputMode,
    OutputWriteError,
    PipelineGenerator,
    dereference,
    generate_file,
)

__all__ = [
    "PipelineGenerator",
    "JSDocBackend",
    "JSDocGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "JSDocError",
    "DereferenceError",
    "OutputWriteError",
    "AtomicWriter",
    "dereference",
    "generate_file",
]
