"""Command line interface for hierns."""

import sys
from typing import final

from hierns.platform.logging import logger
from hierns.ui.cli.args import ArgumentParser
from hierns.ui.cli.args.options import CLIArgs, DecodeArgs, ParseArgs
from hierns.ui.cli.commands import DecodeCommand, ParseCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ParseArgs):
                exit_code = ParseCommand(args).execute()
            else:
                assert isinstance(args, DecodeArgs)
                exit_code = DecodeCommand(args).execute()

            if exit_code != 0:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
