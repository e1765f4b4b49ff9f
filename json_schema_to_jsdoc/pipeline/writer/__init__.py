"""
Output writing.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, validate_jsdoc

__all__ = [
    "AtomicWriter",
    "validate_jsdoc",
]
