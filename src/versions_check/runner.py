"""Validation pipeline for versions.props.

Runs load configuration -> bootstrap pin file -> parse pins -> resolve
artifacts -> run checks -> report, as one synchronous pass.
"""

from collections.abc import Callable, Sequence
from pathlib import Path

from versions_check.checks import CheckContext, raise_for_results, run_checks
from versions_check.config import VERSIONS_PROPS_FILENAME, Settings
from versions_check.console import failure_panel
from versions_check.errors import VersionsCheckError
from versions_check.logging import get_logger
from versions_check.models.check import BootstrapResult, BootstrapStatus, CheckResult
from versions_check.models.pin import Pin
from versions_check.parsers.versions_props import parse_versions_props
from versions_check.recommenders import collect_recommendations
from versions_check.resolvers import resolve_all_artifacts

logger = get_logger(__name__)


def ensure_versions_props(path: Path) -> BootstrapResult:
    """Create an empty pin file if none exists.

    Failure to create it is logged and reported as DEGRADED; the run then
    continues with zero pins.

    Args:
        path: Expected location of the root versions.props

    Returns:
        BootstrapResult describing what happened
    """
    if path.is_file():
        return BootstrapResult(path=path, status=BootstrapStatus.EXISTING)

    logger.info(f"Could not find '{VERSIONS_PROPS_FILENAME}' file, creating...")
    try:
        path.touch(exist_ok=False)
    except OSError as e:
        logger.warning(f"Unable to create empty {path} file, please create this manually: {e}")
        return BootstrapResult(path=path, status=BootstrapStatus.DEGRADED, error_message=str(e))

    return BootstrapResult(path=path, status=BootstrapStatus.CREATED)


class VersionsCheckRunner:
    """Orchestrates one validation run.

    The runner:
    1. Ensures the root versions.props exists
    2. Parses the pins
    3. Lazily resolves artifacts and BOM recommendations through plugins
    4. Runs the selected checks and reports every failure together

    The artifact and recommendation collaborators can be replaced, which is
    how tests run the pipeline without a real build.
    """

    def __init__(
        self,
        settings: Settings,
        resolve_artifacts: Callable[[], set[str]] | None = None,
        load_recommendations: Callable[[], dict[str, str]] | None = None,
    ):
        """Initialize runner.

        Args:
            settings: Effective settings for this run
            resolve_artifacts: Override for the resolver plugin call
            load_recommendations: Override for the recommendation plugin call
        """
        self.settings = settings
        self.resolve_artifacts = resolve_artifacts or self._resolve_with_plugins
        self.load_recommendations = load_recommendations or self._recommend_with_plugins

    def _resolve_with_plugins(self) -> set[str]:
        return resolve_all_artifacts(
            self.settings.resolver, self.settings.root_dir, self.settings.resolver_options
        )

    def _recommend_with_plugins(self) -> dict[str, str]:
        return collect_recommendations(self.settings.root_dir, self.settings.boms)

    def load_pins(self, bootstrap: bool = True) -> list[Pin]:
        """Read the root pin file.

        Args:
            bootstrap: Create the file first if it is missing

        Raises:
            ConfigurationMissing: If the file is missing and was not created
        """
        if bootstrap:
            result = ensure_versions_props(self.settings.versions_props)
            if result.degraded:
                return []
        return parse_versions_props(self.settings.versions_props)

    def check(self, names: Sequence[str] | None = None) -> list[CheckResult]:
        """Run checks and return their results without raising on failures.

        Raises:
            ConfigurationMissing: If versions.props cannot be read
            ResolutionFailure: If artifacts or recommendations cannot be collected
        """
        pins = self.load_pins()
        logger.info(f"Checking {len(pins)} pin(s) from {self.settings.versions_props}")

        context = CheckContext(
            pins=pins,
            resolve_artifacts=self.resolve_artifacts,
            load_recommendations=self.load_recommendations,
            fail_on_redundant_pins=self.settings.fail_on_redundant_pins,
        )
        return run_checks(names, context)

    def run(self, names: Sequence[str] | None = None) -> int:
        """Run checks and report.

        Args:
            names: Check names, or None for every check

        Returns:
            Exit code (0 for success, 1 for any failure)
        """
        try:
            results = self.check(names)
        except VersionsCheckError as e:
            logger.error(str(e))
            if e.__cause__ is not None:
                logger.error(f"Caused by: {e.__cause__}")
            return 1

        for result in results:
            if result.ok:
                logger.info(f"{result.name}: passed")
            else:
                failure_panel(f"{result.name}: {result.header.strip()}", result.entries)

        try:
            raise_for_results(results)
        except VersionsCheckError as e:
            logger.debug(str(e))
            logger.error(f"{sum(not r.ok for r in results)} check(s) failed")
            return 1

        return 0
