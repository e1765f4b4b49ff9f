"""
Configuration for the JSDoc generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    FORCE = "force"  # Default: overwrite
    ERROR_IF_EXISTS = "error"  # Raise error if file exists


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate output before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class JSDocGeneratorConfig:
    """Configuration options for JSDoc generation."""

    # Top-level property keys that never produce a typedef
    skip_properties: list[str] = field(default_factory=lambda: ["$schema"])

    # Appended to a top-level property name to name its typedef
    typedef_suffix: str = "Type"

    # Enums with more members than this are rendered as plain "string"
    enum_string_threshold: int = 30

    # Schema values skipped by the top-level property walk
    ignore: list[dict[str, Any]] = field(default_factory=list)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> JSDocGeneratorConfig:
        """Create a config from a dictionary."""
        config = JSDocGeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "skip_properties": self.skip_properties,
            "typedef_suffix": self.typedef_suffix,
            "enum_string_threshold": self.enum_string_threshold,
            "ignore": self.ignore,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
