"""src/hierns/ui/cli/commands/parse.py
What: Build a segment from command line text and print its report.
Why: Show side by side how the splitting parser and literal construction differ.
"""

from __future__ import annotations

from typing import final

from hierns.config.config import Config
from hierns.features.segment import Segment, literal, parse
from hierns.ui.cli.args.options import ParseArgs
from hierns.ui.cli.display.report import SegmentReportDisplay


@final
class ParseCommand:
    """Execute the ``parse`` subcommand."""

    def __init__(
        self,
        args: ParseArgs,
        *,
        config: Config | None = None,
        display: SegmentReportDisplay | None = None,
    ) -> None:
        self._args = args
        self._config = config or Config.load()
        self._display = display or SegmentReportDisplay()

    def build_segment(self) -> Segment:
        """Construct the segment requested on the command line."""

        if self._args.literal:
            return literal(self._args.text)
        return parse(self._args.text)

    def execute(self) -> int:
        """Print the report and return the exit code."""

        segment = self.build_segment()
        self._display.show(
            segment,
            json_indent=self._config.json_indent,
            show_tree=self._config.show_tree,
        )
        return 0
