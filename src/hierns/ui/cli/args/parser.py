"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from hierns.config.config import Config
from hierns.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from hierns.ui.cli.args.options import CLIArgs, DecodeArgs, ParseArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="hierns",
            description="hierns - Inspect hierarchical path segments and their encodings.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        parse_parser = subparsers.add_parser(
            "parse",
            help="Build a segment from dotted text and show its encodings",
        )
        _ = parse_parser.add_argument(
            "text",
            type=str,
            help="Dotted segment text, e.g. a.b.c (use '' for the empty segment)",
            metavar="TEXT",
        )
        _ = parse_parser.add_argument(
            "--literal",
            action="store_true",
            help="Keep TEXT whole as one atomic segment instead of splitting on dots",
        )
        ArgumentParser._add_verbosity_flags(parse_parser)

        decode_parser = subparsers.add_parser(
            "decode",
            help="Decode a structured (JSON) segment value and show its text form",
        )
        _ = decode_parser.add_argument(
            "source",
            type=str,
            nargs="?",
            help='Inline JSON value, e.g. \'["a", ["b", "c"]]\'',
            metavar="JSON",
        )
        _ = decode_parser.add_argument(
            "--file",
            dest="input_file",
            type=str,
            help="Read the JSON value from a file instead",
            metavar="PATH",
        )
        ArgumentParser._add_verbosity_flags(decode_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        """Attach mutually exclusive ``--verbose`` and ``--quiet`` flags."""

        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show codec debug events",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "parse":
            return ParseArgs(
                command="parse",
                text=parsed_args.text,
                literal=bool(parsed_args.literal),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "decode":
            return ArgumentParser._process_decode(parser, parsed_args, is_verbose, is_quiet)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_decode(
        parser: argparse.ArgumentParser,
        parsed_args: argparse.Namespace,
        is_verbose: bool,
        is_quiet: bool,
    ) -> DecodeArgs:
        """Validate decode inputs: exactly one of JSON and ``--file``."""

        source: str | None = parsed_args.source
        raw_file: str | None = parsed_args.input_file

        if (source is None) == (raw_file is None):
            parser.error("decode requires exactly one of JSON or --file")

        input_file: Path | None = None
        if raw_file is not None:
            input_file = Path(raw_file).expanduser().resolve()
            if not input_file.is_file():
                logger.error("Input file does not exist: %s", input_file)
                sys.exit(1)

        return DecodeArgs(
            command="decode",
            source=source,
            input_file=input_file,
            verbose=is_verbose,
            quiet=is_quiet,
        )


__all__ = ["ArgumentParser"]
