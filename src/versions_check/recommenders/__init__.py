"""BOM recommendation collection.

    from versions_check.recommenders import collect_recommendations

Available plugins:
- maven-bom: Maven BOM POM files listed in versions-check.toml
"""

from pathlib import Path

from versions_check.errors import ResolutionFailure, VersionsCheckError
from versions_check.logging import get_logger

logger = get_logger(__name__)


def collect_recommendations(root_dir: Path, bom_files: list[Path]) -> dict[str, str]:
    """Merge the versions recommended by every provider plugin.

    Later plugins override earlier ones for the same artifact.

    Args:
        root_dir: Root of the multi-project build
        bom_files: Configured BOM files

    Returns:
        Mapping of 'group:name' to recommended version

    Raises:
        ConfigurationMissing: If a configured BOM file is missing
        ResolutionFailure: If a provider fails
    """
    from versions_check.plugins import initialize_plugins, pm

    initialize_plugins()

    try:
        results = pm.hook.collect_recommendations(root_dir=root_dir, bom_files=bom_files)
    except VersionsCheckError:
        raise
    except Exception as e:
        raise ResolutionFailure(f"Error collecting BOM recommendations: {e}") from e

    recommendations: dict[str, str] = {}
    # pluggy calls the most recently registered plugin first
    for result in reversed(results):
        if result:
            recommendations.update(result)

    logger.debug(f"Collected {len(recommendations)} BOM recommendation(s)")
    return recommendations


__all__ = ["collect_recommendations"]
