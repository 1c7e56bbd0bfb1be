"""CycloneDX SBOM resolver plugin.

Reads the resolved dependency graph from CycloneDX JSON SBOMs, such as the
ones produced by the cyclonedx-gradle-plugin. Each SBOM is treated as one
project with a single 'components' configuration. Only maven PURLs
contribute artifacts.

Options (versions-check.toml, [versions-check.resolver-options]):
    sbom-files: SBOM paths relative to the root (default: bom.json and
                build/reports/bom.json, whichever exist)
"""

import json
from pathlib import Path
from typing import Any

from packageurl import PackageURL

from versions_check import hookimpl
from versions_check.logging import get_logger

logger = get_logger(__name__)

RESOLVER_NAME = "cyclonedx"
CONFIGURATION_NAME = "components"
DEFAULT_SBOM_FILES = ("bom.json", "build/reports/bom.json")


def _sbom_files(root_dir: Path, options: dict[str, Any]) -> list[Path]:
    configured = options.get("sbom-files")
    if configured is None:
        return [root_dir / f for f in DEFAULT_SBOM_FILES if (root_dir / f).is_file()]

    paths = [root_dir / str(f) for f in configured]
    missing = [str(p) for p in paths if not p.is_file()]
    if missing:
        raise FileNotFoundError(f"SBOM file(s) not found: {', '.join(missing)}")
    return paths


def _project_name(root_dir: Path, path: Path) -> str:
    # SBOMs outside the build keep their absolute path
    if path.is_relative_to(root_dir):
        return str(path.relative_to(root_dir))
    return str(path)


def _iter_components(components: list[dict]):
    for component in components:
        yield component
        yield from _iter_components(component.get("components", []))


def extract_maven_artifacts(sbom: dict[str, Any]) -> set[str]:
    """Extract 'group:name' coordinates of maven components from a CycloneDX SBOM.

    The metadata component (the project itself) is not a dependency and is
    not included.

    Args:
        sbom: CycloneDX SBOM dictionary

    Returns:
        Set of 'group:name' coordinates
    """
    artifacts = set()
    for component in _iter_components(sbom.get("components", [])):
        purl = component.get("purl")
        if not purl:
            continue
        try:
            parsed = PackageURL.from_string(purl)
        except ValueError as e:
            logger.debug(f"Skipping invalid PURL '{purl}': {e}")
            continue
        if parsed.type == "maven" and parsed.namespace:
            artifacts.add(f"{parsed.namespace}:{parsed.name}")
    return artifacts


@hookimpl
def register_artifact_resolvers() -> dict:
    """Register the CycloneDX SBOM resolver."""
    return {
        "name": RESOLVER_NAME,
        "description": "Resolved components from CycloneDX JSON SBOMs",
        "build_files": list(DEFAULT_SBOM_FILES),
        "available": True,
    }


@hookimpl
def list_configurations(resolver_name: str, root_dir: Path, options: dict[str, Any]) -> list[dict] | None:
    """Expose each SBOM as one project."""
    if resolver_name != RESOLVER_NAME:
        return None

    sbom_files = _sbom_files(root_dir, options)
    if not sbom_files:
        logger.warning(f"No CycloneDX SBOM found under {root_dir}")

    return [
        {
            "project": _project_name(root_dir, path),
            "configuration": CONFIGURATION_NAME,
            "resolvable": True,
        }
        for path in sbom_files
    ]


@hookimpl
def resolve_configuration(
    resolver_name: str,
    root_dir: Path,
    project: str,
    configuration: str,
    options: dict[str, Any],
) -> list[str] | None:
    """Return the maven artifacts listed in one SBOM."""
    if resolver_name != RESOLVER_NAME:
        return None

    with open(root_dir / project, encoding="utf-8") as f:
        sbom = json.load(f)

    return sorted(extract_maven_artifacts(sbom))
