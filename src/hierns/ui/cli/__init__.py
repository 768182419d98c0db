"""Command line interface package.

Exposes ``main`` for the console script and ``python -m hierns``.
"""

from hierns.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
