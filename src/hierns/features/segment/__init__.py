"""
Summary: Export segment feature domain and codec symbols.
Why: Provide a stable import surface for the CLI and tests.
"""

from .domain import (
    NONE,
    AggregateSegment,
    AtomicSegment,
    CodingKey,
    CodingPath,
    DataCorruptedError,
    LiteralValue,
    NoneSegment,
    Segment,
    SegmentComparison,
    SegmentKind,
    StructureMarker,
    StructureToken,
    iter_structure,
    literal,
    render_coding_path,
)
from .usecases.structured_codec import StructuredValue, decode, dumps, encode, loads
from .usecases.text_codec import describe, parse

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
    "StructuredValue",
    "decode",
    "describe",
    "dumps",
    "encode",
    "iter_structure",
    "literal",
    "loads",
    "parse",
    "render_coding_path",
]
