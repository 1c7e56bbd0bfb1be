"""Artifact resolver plugin management.

Provides functions for working with artifact resolvers:
    from versions_check.resolvers import (
        get_registered_resolvers,
        list_available_resolvers,
        get_resolver_info,
        list_configurations,
        resolve_all_artifacts,
    )

Available plugins:
- gradle-lockfile: Gradle dependency lock state files
- cyclonedx: CycloneDX JSON SBOMs
"""

from pathlib import Path
from typing import Any

from versions_check.errors import ResolutionFailure
from versions_check.logging import get_logger
from versions_check.models.resolver import ConfigurationRef, ResolverInfo
from versions_check.utils import artifact_key

logger = get_logger(__name__)

# Track registered resolvers
_registered_resolvers: dict[str, ResolverInfo] = {}


def _register_resolvers(pm) -> None:
    """Register resolvers from plugins.

    Called by initialize_plugins() in versions_check.plugins.

    Args:
        pm: The pluggy PluginManager instance
    """
    global _registered_resolvers
    _registered_resolvers = {}

    for resolver_data in pm.hook.register_artifact_resolvers():
        if resolver_data:
            info = ResolverInfo.from_dict(resolver_data)
            _registered_resolvers[info.name] = info
            logger.debug(f"Registered resolver: {info.name}")


def _reset_resolvers() -> None:
    """Reset resolver registry.

    Called by reset_plugins() in versions_check.plugins.
    """
    global _registered_resolvers
    _registered_resolvers = {}


def get_registered_resolvers() -> dict[str, ResolverInfo]:
    """Get all registered resolvers.

    Returns:
        Dictionary mapping resolver name to ResolverInfo.
    """
    from versions_check.plugins import initialize_plugins

    initialize_plugins()
    return _registered_resolvers.copy()


def list_available_resolvers() -> list[str]:
    """Get names of resolvers that can run in this environment."""
    return [name for name, info in get_registered_resolvers().items() if info.available]


def get_resolver_info(resolver_name: str) -> ResolverInfo | None:
    """Get info for a specific resolver, or None if not registered."""
    return get_registered_resolvers().get(resolver_name)


def list_configurations(
    resolver_name: str, root_dir: Path, options: dict[str, Any] | None = None
) -> list[ConfigurationRef]:
    """List every configuration of every project, as reported by the resolver.

    Raises:
        ResolutionFailure: If the resolver is unknown or fails to enumerate the build
    """
    from versions_check.plugins import pm

    if get_resolver_info(resolver_name) is None:
        available = ", ".join(sorted(get_registered_resolvers())) or "none"
        raise ResolutionFailure(f"Unknown resolver '{resolver_name}'. Available: {available}")

    try:
        results = pm.hook.list_configurations(
            resolver_name=resolver_name, root_dir=root_dir, options=options or {}
        )
    except Exception as e:
        raise ResolutionFailure(
            f"Error listing configurations of {root_dir} with resolver '{resolver_name}': {e}"
        ) from e

    for result in results:
        if result is not None:
            return [ConfigurationRef.from_dict(d) for d in result]

    raise ResolutionFailure(f"No plugin listed configurations for resolver '{resolver_name}'")


def resolve_configuration(
    resolver_name: str, root_dir: Path, ref: ConfigurationRef, options: dict[str, Any] | None = None
) -> set[str]:
    """Resolve one configuration into 'group:name' coordinates.

    Raises:
        ResolutionFailure: Chained to the underlying error, naming the configuration
    """
    from versions_check.plugins import pm

    try:
        results = pm.hook.resolve_configuration(
            resolver_name=resolver_name,
            root_dir=root_dir,
            project=ref.project,
            configuration=ref.configuration,
            options=options or {},
        )
        for result in results:
            if result is not None:
                return {artifact_key(coordinate) for coordinate in result}
    except Exception as e:
        raise ResolutionFailure.for_configuration(ref.project, ref.configuration) from e

    raise ResolutionFailure.for_configuration(ref.project, ref.configuration)


def resolve_all_artifacts(
    resolver_name: str, root_dir: Path, options: dict[str, Any] | None = None
) -> set[str]:
    """Union the resolved artifacts of every resolvable configuration in the build.

    Any single failure aborts the whole collection; a partial set would
    report false unused pins.

    Args:
        resolver_name: Registered resolver name
        root_dir: Root of the multi-project build
        options: Resolver options from versions-check.toml

    Returns:
        Deduplicated set of 'group:name' coordinates

    Raises:
        ResolutionFailure: If any configuration fails to resolve
    """
    artifacts: set[str] = set()
    refs = list_configurations(resolver_name, root_dir, options)

    for ref in refs:
        if not ref.resolvable:
            logger.debug(f"Skipping non-resolvable configuration {ref}")
            continue
        resolved = resolve_configuration(resolver_name, root_dir, ref, options)
        logger.debug(f"Resolved {len(resolved)} artifact(s) in {ref}")
        artifacts |= resolved

    logger.info(f"Resolved {len(artifacts)} artifact(s) across {len(refs)} configuration(s)")
    return artifacts


__all__ = [
    "get_registered_resolvers",
    "list_available_resolvers",
    "get_resolver_info",
    "list_configurations",
    "resolve_configuration",
    "resolve_all_artifacts",
]
