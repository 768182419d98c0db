"""Command line argument handling package."""

from hierns.ui.cli.args.parser import ArgumentParser
from hierns.ui.cli.args.options import CLIArgs, DecodeArgs, ParseArgs

__all__ = ["ArgumentParser", "CLIArgs", "DecodeArgs", "ParseArgs"]
