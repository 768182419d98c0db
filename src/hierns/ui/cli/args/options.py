"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ParseArgs:
    """Command line arguments for the ``parse`` subcommand."""

    command: Literal["parse"]
    text: str
    literal: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class DecodeArgs:
    """Command line arguments for the ``decode`` subcommand.

    Exactly one of ``source`` (inline JSON) and ``input_file`` is set.
    """

    command: Literal["decode"]
    source: str | None
    input_file: Path | None
    verbose: bool
    quiet: bool


CLIArgs = ParseArgs | DecodeArgs

__all__ = ["CLIArgs", "DecodeArgs", "ParseArgs"]
