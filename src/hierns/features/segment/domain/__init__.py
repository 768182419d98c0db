"""
Summary: Domain types for hierarchical path segments.
Why: Provide a stable import surface for codecs, the CLI and tests.
"""

from .comparison import SegmentComparison
from .errors import CodingKey, CodingPath, DataCorruptedError, render_coding_path
from .segment import (
    NONE,
    AggregateSegment,
    AtomicSegment,
    LiteralValue,
    NoneSegment,
    Segment,
    SegmentKind,
    StructureMarker,
    StructureToken,
    iter_structure,
    literal,
)

__all__ = [
    "NONE",
    "AggregateSegment",
    "AtomicSegment",
    "CodingKey",
    "CodingPath",
    "DataCorruptedError",
    "LiteralValue",
    "NoneSegment",
    "Segment",
    "SegmentComparison",
    "SegmentKind",
    "StructureMarker",
    "StructureToken",
    "iter_structure",
    "literal",
    "render_coding_path",
]
