"""
Summary: Convert segments to and from their dot-delimited text form.
Why: Parse user-facing names into segments and print segments back as text.
"""

from __future__ import annotations

from hierns.features.segment.domain.segment import (
    NONE,
    SEPARATOR,
    AggregateSegment,
    AtomicSegment,
    Segment,
)
from hierns.platform.logging import logger


def describe(segment: Segment) -> str:
    """Serialize a segment to text.

    The empty segment becomes ``""``, an atomic segment its own value, and an
    aggregate the dot-joined text of its children wrapped in parentheses.

    Args:
        segment: Segment to serialize.

    Returns:
        str: Textual form of ``segment``.
    """
    return segment.description


def parse(text: str) -> Segment:
    """Parse dot-delimited text into a segment. Never fails.

    Text without a separator is kept whole as one atomic segment. Text with
    separators becomes a flat aggregate of atomic components. Parentheses are
    not interpreted, so the output of ``describe`` for an aggregate does not
    parse back to the same aggregate.

    Args:
        text: Text to parse.

    Returns:
        Segment: ``NONE``, an ``AtomicSegment`` or a flat ``AggregateSegment``.
    """
    if not text:
        segment: Segment = NONE
    else:
        components = text.split(SEPARATOR)
        if len(components) == 1:
            segment = AtomicSegment(text)
        else:
            segment = AggregateSegment(tuple(AtomicSegment(part) for part in components))

    logger.debug(
        "Parsed %r as %s segment",
        text,
        segment.kind,
        extra={"segment_event": "segment.parse", "segment_text": segment.description},
    )
    return segment


__all__ = ["describe", "parse"]
