"""Command execution package for CLI."""

from hierns.ui.cli.commands.decode import DecodeCommand
from hierns.ui.cli.commands.parse import ParseCommand

__all__ = ["DecodeCommand", "ParseCommand"]
