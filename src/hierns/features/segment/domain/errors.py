"""
Summary: Error raised when structured data cannot be decoded into a segment.
Why: Report malformed external data together with where it sits in the document.
"""

from __future__ import annotations

from collections.abc import Sequence

CodingKey = str | int
CodingPath = tuple[CodingKey, ...]


def render_coding_path(coding_path: Sequence[CodingKey]) -> str:
    """Render a coding path as ``$``, ``$[0]`` or ``$.segments[2]``.

    Args:
        coding_path: Keys (mapping keys) and indices (list positions) from the root.

    Returns:
        str: Human-readable path string.
    """
    rendered = "$"
    for key in coding_path:
        if isinstance(key, int):
            rendered += f"[{key}]"
        else:
            rendered += f".{key}"
    return rendered


class DataCorruptedError(ValueError):
    """Raised when a structured value is neither null, a string, nor a list of segments."""

    def __init__(self, coding_path: Sequence[CodingKey], debug_description: str) -> None:
        self.coding_path: CodingPath = tuple(coding_path)
        self.debug_description: str = debug_description
        super().__init__(
            f"Data corrupted at {render_coding_path(self.coding_path)}: {debug_description}"
        )


__all__ = ["CodingKey", "CodingPath", "DataCorruptedError", "render_coding_path"]
