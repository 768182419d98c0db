"""
Summary: Recursive segment value type naming nodes in a dotted namespace.
Why: Give every codec and caller one immutable, hashable definition to share.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from itertools import zip_longest
from typing import Final, Literal, final, override

SegmentKind = Literal["none", "atomic", "aggregate"]

SEPARATOR: Final[str] = "."
AGGREGATE_OPEN: Final[str] = "("
AGGREGATE_CLOSE: Final[str] = ")"


class Segment(ABC):
    """Base class for the three segment variants."""

    @abstractmethod
    def to_array(self) -> tuple[Segment, ...]:
        """Flatten the segment by exactly one level.

        Returns:
            tuple[Segment, ...]: ``()`` for the empty segment, ``(self,)`` for an
            atomic segment, and the children unchanged for an aggregate.
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Get the dotted textual form of this segment.

        Returns:
            str: Textual form; aggregates are wrapped in parentheses.
        """
        pass

    @property
    @abstractmethod
    def kind(self) -> SegmentKind:
        """Get the variant name of this segment."""
        pass

    @property
    def is_none(self) -> bool:
        """Whether this is the empty segment."""
        return False

    @override
    def __str__(self) -> str:
        return self.description


@final
@dataclass(frozen=True)
class NoneSegment(Segment):
    """The empty segment, naming nothing."""

    @override
    def to_array(self) -> tuple[Segment, ...]:
        return ()

    @property
    @override
    def description(self) -> str:
        return ""

    @property
    @override
    def kind(self) -> SegmentKind:
        return "none"

    @property
    @override
    def is_none(self) -> bool:
        return True

    @override
    def __repr__(self) -> str:
        return "NONE"


@final
@dataclass(frozen=True)
class AtomicSegment(Segment):
    """A single leaf name. The value is kept verbatim, dots included."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"AtomicSegment value must be str, got {type(self.value).__name__}"
            )

    @override
    def to_array(self) -> tuple[Segment, ...]:
        return (self,)

    @property
    @override
    def description(self) -> str:
        return self.value

    @property
    @override
    def kind(self) -> SegmentKind:
        return "atomic"


@final
@dataclass(frozen=True)
class AggregateSegment(Segment):
    """An ordered, possibly empty, possibly nested run of child segments.

    Nesting depth is unbounded, so description, equality, hashing and repr
    walk the tree with ``iter_structure`` instead of recursing.
    """

    children: tuple[Segment, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple so the value stays hashable.
        children = tuple(self.children)
        for index, child in enumerate(children):
            if not isinstance(child, Segment):
                raise TypeError(
                    f"AggregateSegment child {index} must be a Segment, "
                    f"got {type(child).__name__}"
                )
        object.__setattr__(self, "children", children)

    @override
    def to_array(self) -> tuple[Segment, ...]:
        return self.children

    @property
    @override
    def description(self) -> str:
        return "".join(
            token.value if isinstance(token, StructureMarker) else token.description
            for token in iter_structure(self)
        )

    @property
    @override
    def kind(self) -> SegmentKind:
        return "aggregate"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateSegment):
            return NotImplemented
        if self is other:
            return True
        _missing = object()
        return all(
            left == right
            for left, right in zip_longest(
                iter_structure(self), iter_structure(other), fillvalue=_missing
            )
        )

    @override
    def __hash__(self) -> int:
        return hash(tuple(iter_structure(self)))

    @override
    def __repr__(self) -> str:
        parts: list[str] = []
        for token in iter_structure(self):
            if token is StructureMarker.OPEN:
                parts.append("AggregateSegment([")
            elif token is StructureMarker.SEPARATOR:
                parts.append(", ")
            elif token is StructureMarker.CLOSE:
                parts.append("])")
            else:
                parts.append(repr(token))
        return "".join(parts)


class StructureMarker(Enum):
    """Boundary tokens yielded by ``iter_structure`` around aggregate children."""

    OPEN = AGGREGATE_OPEN
    SEPARATOR = SEPARATOR
    CLOSE = AGGREGATE_CLOSE


StructureToken = StructureMarker | AtomicSegment | NoneSegment


def iter_structure(segment: Segment) -> Iterator[StructureToken]:
    """Walk a segment depth-first without recursion.

    Aggregates yield ``OPEN``, their children separated by ``SEPARATOR``, then
    ``CLOSE``; leaves yield themselves. The token stream determines the
    segment uniquely, so two segments are equal iff their streams are.

    Args:
        segment: Root segment to walk.

    Yields:
        StructureToken: Markers and leaf segments in textual order.
    """
    stack: list[Segment | StructureMarker] = [segment]
    while stack:
        item = stack.pop()
        if isinstance(item, AggregateSegment):
            stack.append(StructureMarker.CLOSE)
            for index in range(len(item.children) - 1, -1, -1):
                stack.append(item.children[index])
                if index:
                    stack.append(StructureMarker.SEPARATOR)
            yield StructureMarker.OPEN
        elif isinstance(item, (StructureMarker, AtomicSegment, NoneSegment)):
            yield item
        else:
            raise TypeError(f"Unsupported segment type: {type(item).__name__}")


NONE: Final[NoneSegment] = NoneSegment()

LiteralValue = Segment | str | list["LiteralValue"] | tuple["LiteralValue", ...] | None


def literal(value: LiteralValue) -> Segment:
    """Build a segment the way a literal in source code would.

    Strings become atomic segments without any splitting, so ``literal("a.b")``
    is ``AtomicSegment("a.b")``. Lists and tuples become aggregates, converting
    string and nested list elements by the same rules.

    Args:
        value: A segment, string, ``None`` or a list/tuple of literal values.

    Returns:
        Segment: The constructed segment.

    Raises:
        TypeError: If ``value`` (or a nested element) has an unsupported type.
    """
    if value is None:
        return NONE
    if isinstance(value, Segment):
        return value
    if isinstance(value, str):
        return AtomicSegment(value)
    if isinstance(value, (list, tuple)):
        return AggregateSegment(tuple(literal(element) for element in value))
    raise TypeError(f"Cannot build a segment literal from {type(value).__name__}")


__all__ = [
    "AGGREGATE_CLOSE",
    "AGGREGATE_OPEN",
    "NONE",
    "SEPARATOR",
    "AggregateSegment",
    "AtomicSegment",
    "LiteralValue",
    "NoneSegment",
    "Segment",
    "SegmentKind",
    "StructureMarker",
    "StructureToken",
    "iter_structure",
    "literal",
]
