"""Tests for ``SegmentRichHandler`` rendering and logger setup."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from hierns.platform.logging import LOGGER_NAME, SegmentRichHandler, setup_logger


def _make_handler() -> SegmentRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return SegmentRichHandler(console=console)


def _build_record(msg: str = "", *args: Any, **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with segment extras for testing."""

    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_parse_event_includes_segment_text() -> None:
    handler = _make_handler()
    record = _build_record(segment_event="segment.parse", segment_text="(a.b)")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert rendered.plain == "🔤 Parsed (a.b)"


def test_render_decode_error_includes_coding_path() -> None:
    handler = _make_handler()
    record = _build_record(
        "Structured decode failed at %s: %s",
        "$[1]",
        "bad",
        segment_event="segment.decode.error",
        coding_path=(1,),
    )

    rendered = handler.render_message(record, record.getMessage())
    assert isinstance(rendered, Text)
    assert rendered.plain.startswith("❌ Decode failed @ $[1]")
    assert "bad" in rendered.plain


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record("hello")

    rendered = handler.render_message(record, "hello")
    assert isinstance(rendered, Text)
    assert rendered.plain == "hello"


def test_style_segment_text_highlights_structure() -> None:
    styled = SegmentRichHandler.style_segment_text("(a.b)")
    assert styled.plain == "(a.b)"
    styles = [str(span.style) for span in styled.spans]
    assert styles.count("magenta") == 3
    assert styles.count("white") == 2


def test_style_segment_text_marks_empty_segment() -> None:
    assert SegmentRichHandler.style_segment_text("").plain == "∅"


def test_setup_logger_attaches_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "hierns.log"
    console = Console(file=StringIO())
    try:
        logger = setup_logger(log_file=log_file, console_level=logging.WARNING, console=console)

        assert logger.name == LOGGER_NAME
        rich_handlers = [h for h in logger.handlers if isinstance(h, SegmentRichHandler)]
        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(rich_handlers) == 1
        assert rich_handlers[0].level == logging.WARNING
        assert len(file_handlers) == 1
        assert log_file.parent.is_dir()

        logger.debug("written to file only")
        file_handlers[0].flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()
