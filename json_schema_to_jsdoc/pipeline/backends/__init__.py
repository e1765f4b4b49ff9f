"""
Documentation backends.

Contains the typedef renderers.
"""

from __future__ import annotations

from .base import DocBackend
from .jsdoc_backend import FieldAnnotation, JSDocBackend

__all__ = [
    "DocBackend",
    "JSDocBackend",
    "FieldAnnotation",
]
