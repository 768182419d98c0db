"""Allow ``python -m hierns`` to run the command line interface."""

import sys

from hierns.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
