"""Entry point for running versions-check as a module.

Allows the package to be run as:
    python -m versions_check
"""

import sys

from versions_check.cli import main

if __name__ == "__main__":
    sys.exit(main())
