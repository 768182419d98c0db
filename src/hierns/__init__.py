# Where: hierns.__init__
# What: Re-export the segment value type and its codecs at the package root.
# Why: Let callers write ``from hierns import Segment, parse`` without feature paths.

"""Hierarchical path segments with text and structured codecs."""

from hierns.features.segment import (
    NONE,
    AggregateSegment,
    AtomicSegment,
    DataCorruptedError,
    NoneSegment,
    Segment,
    SegmentComparison,
    decode,
    describe,
    dumps,
    encode,
    literal,
    loads,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "NONE",
    "AggregateSegment",
    "AtomicSegment",
    "DataCorruptedError",
    "NoneSegment",
    "Segment",
    "SegmentComparison",
    "decode",
    "describe",
    "dumps",
    "encode",
    "literal",
    "loads",
    "parse",
]
