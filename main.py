#!/usr/bin/env python3
"""Convenience entry point for versions-check.

    uv run main.py check
    uv run main.py --root path/to/build list-pins

Prefer the installed command:
    uv run versions-check check
    python -m versions_check check
"""

import sys

from versions_check.cli import main

if __name__ == "__main__":
    sys.exit(main())
