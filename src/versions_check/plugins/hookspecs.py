"""Hook specifications for versions-check plugins.

This module defines the hooks that plugins implement to supply the two
inputs the checks consume: the artifacts a build resolves, and the versions
recommended by imported BOMs. Plugins use the @hookimpl decorator.

Example resolver plugin:

    from versions_check import hookimpl

    @hookimpl
    def register_artifact_resolvers():
        return {
            "name": "my-resolver",
            "description": "Reads artifacts from my build tool",
            "build_files": ["my-build.lock"],
        }
"""

from pathlib import Path
from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("versions_check")


class ResolverSpec:
    """Hook specifications for artifact resolver plugins.

    A resolver exposes a build as projects and configurations, and resolves
    one configuration at a time so a failure can name the configuration that
    caused it.
    """

    @hookspec
    def register_artifact_resolvers(self) -> dict:  # type: ignore[empty-body]
        """Register an artifact resolver provided by this plugin.

        Returns:
            Dict with resolver info:
                - name: Resolver identifier (required)
                - description: Human-readable description (required)
                - build_files: Files the resolver reads
                - available: Whether the resolver can run here (default True)
        """
        ...

    @hookspec
    def list_configurations(
        self,
        resolver_name: str,
        root_dir: Path,
        options: dict[str, Any],
    ) -> list[dict] | None:
        """List every dependency configuration of every project in the build.

        Args:
            resolver_name: Resolver being asked (plugins ignore other names)
            root_dir: Root of the multi-project build
            options: Resolver options from versions-check.toml

        Returns:
            List of dicts with:
                - project: Project path (e.g., ':' or ':service')
                - configuration: Configuration name
                - resolvable: Whether the configuration can be resolved
            None if this plugin doesn't handle this resolver.
        """

    @hookspec
    def resolve_configuration(
        self,
        resolver_name: str,
        root_dir: Path,
        project: str,
        configuration: str,
        options: dict[str, Any],
    ) -> list[str] | None:
        """Resolve one configuration.

        Args:
            resolver_name: Resolver being asked (plugins ignore other names)
            root_dir: Root of the multi-project build
            project: Project path from list_configurations
            configuration: Configuration name from list_configurations
            options: Resolver options from versions-check.toml

        Returns:
            Resolved artifact coordinates, 'group:name' or 'group:name:version'.
            None if this plugin doesn't handle this resolver.

        Raises:
            Exception: Any error; the caller wraps it with the configuration name
        """


class RecommendationSpec:
    """Hook specifications for BOM recommendation providers."""

    @hookspec
    def collect_recommendations(
        self,
        root_dir: Path,
        bom_files: list[Path],
    ) -> dict[str, str] | None:
        """Collect versions recommended by imported BOMs.

        Args:
            root_dir: Root of the multi-project build
            bom_files: BOM files configured in versions-check.toml

        Returns:
            Mapping of 'group:name' to recommended version, or None if this
            plugin has nothing to contribute.
        """
