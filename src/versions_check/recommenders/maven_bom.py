"""Maven BOM recommendation provider plugin."""

from pathlib import Path

from versions_check import hookimpl
from versions_check.errors import ConfigurationMissing, ResolutionFailure
from versions_check.logging import get_logger
from versions_check.parsers.maven_bom import parse_maven_bom

logger = get_logger(__name__)


@hookimpl
def collect_recommendations(root_dir: Path, bom_files: list[Path]) -> dict[str, str] | None:
    """Read managed versions from each configured BOM, in order."""
    if not bom_files:
        return None

    recommendations: dict[str, str] = {}
    for bom_file in bom_files:
        if not bom_file.is_file():
            raise ConfigurationMissing(bom_file)
        try:
            managed = parse_maven_bom(bom_file)
        except ValueError as e:
            raise ResolutionFailure(f"Error reading BOM {bom_file}: {e}") from e

        logger.debug(f"{bom_file}: {len(managed)} managed version(s)")
        recommendations.update(managed)

    return recommendations
