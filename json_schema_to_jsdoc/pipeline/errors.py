"""
Exceptions raised by the JSDoc generation pipeline.
"""

from __future__ import annotations


class JSDocError(Exception):
    """Base class for all pipeline errors."""


class DereferenceError(JSDocError):
    """Raised when a ``$ref`` cannot be resolved.

    This can happen when:
    - The JSON pointer does not match anything in the target document
    - The referenced file is missing or is not valid JSON
    - The reference chain loops back on itself
    """


class OutputWriteError(JSDocError):
    """Raised when generated output fails validation before being written."""
