"""src/hierns/ui/cli/display/report.py
What: Render a segment report (text form, flattening, JSON, tree) with Rich.
Why: Share one presentation between the parse and decode commands.
"""

from __future__ import annotations

from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from hierns.features.segment import AggregateSegment, Segment, dumps
from hierns.platform.logging import SegmentRichHandler


def _label(segment: Segment) -> Text:
    """Build the one-line label used for a segment node."""

    label = Text(f"{segment.kind} ", style="bold cyan")
    _ = label.append_text(SegmentRichHandler.style_segment_text(segment.description))
    return label


def build_segment_tree(segment: Segment, parent: Tree | None = None) -> Tree:
    """Build a Rich tree mirroring the nesting of ``segment``.

    Args:
        segment: Segment to render.
        parent: Node to attach to. A new root is created when omitted.

    Returns:
        Tree: The node created for ``segment``.
    """
    node = Tree(_label(segment)) if parent is None else parent.add(_label(segment))
    if isinstance(segment, AggregateSegment):
        for child in segment.children:
            _ = build_segment_tree(child, node)
    return node


@final
class SegmentReportDisplay:
    """Print a summary table (and optional tree) for a segment."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def show(self, segment: Segment, *, json_indent: int, show_tree: bool) -> None:
        """Render the report.

        Args:
            segment: Segment to describe.
            json_indent: Indentation for the structured encoding.
            show_tree: Whether to render the nesting as a tree.
        """
        table = Table(box=box.SIMPLE, show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")

        table.add_row("Kind", segment.kind)
        table.add_row("Text", SegmentRichHandler.style_segment_text(segment.description))

        flattened = Text(", ").join(
            SegmentRichHandler.style_segment_text(item.description)
            for item in segment.to_array()
        )
        table.add_row(f"Flattened ({len(segment.to_array())})", flattened)
        table.add_row(
            "Structured",
            Text(dumps(segment, indent=json_indent)),
        )

        self._console.print(table)
        if show_tree:
            self._console.print(build_segment_tree(segment))
