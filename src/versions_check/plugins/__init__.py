"""Plugin system for versions-check.

Uses Pluggy for plugin discovery and hook management.

Core plugin functions:
    from versions_check.plugins import initialize_plugins, reset_plugins, get_plugins

For artifact resolvers, import from versions_check.resolvers:
    from versions_check.resolvers import (
        get_registered_resolvers,
        list_available_resolvers,
        resolve_all_artifacts,
    )

For BOM recommendations, import from versions_check.recommenders:
    from versions_check.recommenders import collect_recommendations
"""

import contextlib
import importlib

import pluggy

from versions_check.logging import get_logger
from versions_check.plugins.hookspecs import RecommendationSpec, ResolverSpec

logger = get_logger(__name__)


# Plugins bundled with versions-check, loaded automatically on initialization
DEFAULT_PLUGINS = (
    "versions_check.resolvers.gradle_lockfile",
    "versions_check.resolvers.cyclonedx",
    "versions_check.recommenders.maven_bom",
)


pm = pluggy.PluginManager("versions_check")
pm.add_hookspecs(ResolverSpec)
pm.add_hookspecs(RecommendationSpec)

_initialized: bool = False


def _load_default_plugins() -> None:
    """Load plugins bundled with versions-check."""
    for plugin_path in DEFAULT_PLUGINS:
        module = importlib.import_module(plugin_path)
        if pm.get_plugin(plugin_path) is None:
            pm.register(module, name=plugin_path)
        logger.debug(f"Loaded plugin: {plugin_path}")


def _load_external_plugins() -> None:
    """Discover and load external plugins via entry points."""
    num_loaded = pm.load_setuptools_entrypoints("versions_check")
    if num_loaded > 0:
        logger.debug(f"Loaded {num_loaded} external plugin(s)")


def initialize_plugins() -> None:
    """Initialize the plugin system.

    Loads bundled plugins first, then discovers external plugins via entry
    points, then collects resolver registrations.

    Idempotent: calls after the first have no effect.
    """
    global _initialized

    if _initialized:
        return

    _load_default_plugins()
    _load_external_plugins()

    from versions_check.resolvers import _register_resolvers

    _register_resolvers(pm)

    _initialized = True

    from versions_check.resolvers import _registered_resolvers

    logger.debug(f"Plugin system initialized with {len(_registered_resolvers)} resolver(s)")


def reset_plugins() -> None:
    """Reset the plugin system (mainly for testing).

    Unregisters all plugins and clears the resolver registry. The next call
    to initialize_plugins() re-initializes the system.
    """
    global _initialized

    for plugin in list(pm.get_plugins()):
        with contextlib.suppress(ValueError):
            pm.unregister(plugin)

    from versions_check.resolvers import _reset_resolvers

    _reset_resolvers()

    _initialized = False


def get_plugins() -> list[dict]:
    """Get information about loaded plugins.

    Returns:
        List of plugin info dictionaries with name and module.
    """
    if not _initialized:
        initialize_plugins()

    return [
        {"name": pm.get_name(plugin), "module": getattr(plugin, "__name__", str(plugin))}
        for plugin in pm.get_plugins()
    ]


__all__ = [
    "pm",
    "DEFAULT_PLUGINS",
    "initialize_plugins",
    "reset_plugins",
    "get_plugins",
]
