"""versions-check: Validate versions.props dependency pins against a resolved build."""

import pluggy

from versions_check.config import __version__
from versions_check.logging import get_logger

# Convenience export for plugins: from versions_check import hookimpl
hookimpl = pluggy.HookimplMarker("versions_check")

__all__ = [
    "__version__",
    "hookimpl",
    "get_logger",
]
