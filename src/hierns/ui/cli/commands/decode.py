"""src/hierns/ui/cli/commands/decode.py
What: Decode a structured JSON segment value and print its report.
Why: Let users check stored segment documents before they are loaded elsewhere.
"""

from __future__ import annotations

from typing import final

from hierns.config.config import Config
from hierns.features.segment import DataCorruptedError, Segment, loads
from hierns.platform.logging import logger
from hierns.ui.cli.args.options import DecodeArgs
from hierns.ui.cli.display.report import SegmentReportDisplay


@final
class DecodeCommand:
    """Execute the ``decode`` subcommand."""

    def __init__(
        self,
        args: DecodeArgs,
        *,
        config: Config | None = None,
        display: SegmentReportDisplay | None = None,
    ) -> None:
        self._args = args
        self._config = config or Config.load()
        self._display = display or SegmentReportDisplay()

    def read_source(self) -> str | bytes:
        """Return the JSON given inline, or the raw bytes of ``--file``."""

        if self._args.input_file is not None:
            return self._args.input_file.read_bytes()
        assert self._args.source is not None
        return self._args.source

    def execute(self) -> int:
        """Decode, print the report and return the exit code (1 on corrupt data)."""

        try:
            segment: Segment = loads(self.read_source())
        except DataCorruptedError as e:
            logger.error("%s", e)
            return 1

        self._display.show(
            segment,
            json_indent=self._config.json_indent,
            show_tree=self._config.show_tree,
        )
        return 0
