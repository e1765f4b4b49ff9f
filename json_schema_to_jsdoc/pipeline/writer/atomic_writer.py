"""
Atomic file writer for safe output generation.

Ensures that file writes are atomic to prevent a half-written typedef
file from being picked up by editors or type checkers.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import OutputWriteError

EXPORT_LINE = re.compile(r"module\.exports = \{ .* \}")


def validate_jsdoc(content: str) -> None:
    """Check that *content* is a complete generated JSDoc module.

    Raises:
        OutputWriteError: If the trailing export statement is missing
    """
    # Only "\n" ends a line; keys may contain other Unicode line breaks
    last_line = content[:-1].rsplit("\n", 1)[-1]
    if not content.endswith("\n") or not EXPORT_LINE.fullmatch(last_line):
        raise OutputWriteError("Generated JSDoc does not end with a module.exports statement")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function, defaults to validate_jsdoc
        """
        self._validate = validate or validate_jsdoc

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputWriteError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            if validate:
                self.validate(content)

            temp_path.replace(path)

        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def validate(self, content: str) -> None:
        """Run the configured validation on *content* without writing it."""
        self._validate(content)
