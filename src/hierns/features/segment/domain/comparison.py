"""
Summary: Absent/present tag that compares against segments with ``==``.
Why: Keep the established comparison results stable for existing call sites.
"""

from __future__ import annotations

from enum import Enum
from typing import final, override

from .segment import Segment


@final
class SegmentComparison(Enum):
    """Tag compared against a segment with ``==`` in either operand order.

    ``ABSENT`` matches every segment, including non-empty ones, and ``PRESENT``
    is its negation, so it never matches. Use ``Segment.is_none`` to test for
    the empty segment itself.
    """

    ABSENT = "absent"
    PRESENT = "present"

    def matches(self, segment: Segment) -> bool:
        """Evaluate this tag against ``segment``.

        Args:
            segment: Segment to compare with.

        Returns:
            bool: ``True`` for ``ABSENT``; ``False`` for ``PRESENT``.
        """
        if self is SegmentComparison.ABSENT:
            # Empty and non-empty segments both match.
            return True
        return not SegmentComparison.ABSENT.matches(segment)

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Segment):
            return self.matches(other)
        if isinstance(other, SegmentComparison):
            return self is other
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(self.value)


__all__ = ["SegmentComparison"]
