"""Display helpers for CLI output."""

from hierns.ui.cli.display.report import SegmentReportDisplay, build_segment_tree

__all__ = ["SegmentReportDisplay", "build_segment_tree"]
