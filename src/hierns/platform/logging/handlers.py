"""Rich console handler for segment codec events.

Where: platform/logging/handlers.py
What: Render structured ``segment_event`` records with icons and styled segment text.
Why: Keep codec modules free of presentation concerns.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from hierns.features.segment.domain.errors import render_coding_path


class SegmentRichHandler(RichHandler):
    """Rich handler that highlights segment separators and codec events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "segment.parse": ("🔤", "cyan"),
        "segment.encode": ("📦", "magenta"),
        "segment.decode": ("✅", "green"),
        "segment.decode.error": ("❌", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "segment.parse": "Parsed",
        "segment.encode": "Encoded",
        "segment.decode": "Decoded",
        "segment.decode.error": "Decode failed",
    }
    _STRUCTURE_CHARS: ClassVar[frozenset[str]] = frozenset(".()")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def style_segment_text(cls, segment_text: str) -> Text:
        """Style segment text with separators and parentheses highlighted.

        Args:
            segment_text: Textual form of a segment.

        Returns:
            Text: Styled text; the empty segment renders as ``∅``.
        """
        text = Text()
        if not segment_text:
            _ = text.append("∅", style=Style(color="bright_black", italic=True))
            return text

        for char in segment_text:
            if char in cls._STRUCTURE_CHARS:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_segment_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured segment events with dedicated styling."""

        event = getattr(record, "segment_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, event))

        segment_text = getattr(record, "segment_text", None)
        if isinstance(segment_text, str):
            _ = body.append(" ")
            _ = body.append_text(self.style_segment_text(segment_text))

        coding_path = getattr(record, "coding_path", None)
        if isinstance(coding_path, Sequence) and not isinstance(coding_path, str):
            _ = body.append(f" @ {render_coding_path(coding_path)}")
            _ = body.append(f" ({record.getMessage()})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for segment events."""

        segment_text = self._render_segment_message(record)
        if segment_text is not None:
            return segment_text

        return super().render_message(record, message)


__all__ = ["SegmentRichHandler"]
