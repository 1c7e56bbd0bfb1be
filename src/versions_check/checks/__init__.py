"""Check registry and the aggregate check step.

    from versions_check.checks import CheckContext, run_checks

The aggregate step runs every check and collects all failures, so one run
surfaces every problem in the pin file.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from versions_check.checks.bom_conflict import check_no_bom_conflict, find_bom_conflicts
from versions_check.checks.unused_pins import check_no_unused_pin, find_unused_pins
from versions_check.config import ALL_CHECKS, CHECK_NO_BOM_CONFLICT, CHECK_NO_UNUSED_PIN
from versions_check.errors import ValidationFailure
from versions_check.logging import get_logger
from versions_check.models.check import CheckResult
from versions_check.models.pin import Pin

logger = get_logger(__name__)


@dataclass
class CheckContext:
    """Inputs shared by the checks of one run.

    Artifacts and recommendations are supplied as callables and fetched at
    most once, only by the checks that need them.
    """

    pins: Sequence[Pin]
    resolve_artifacts: Callable[[], set[str]]
    load_recommendations: Callable[[], dict[str, str]] = dict
    fail_on_redundant_pins: bool = False
    _artifacts: set[str] | None = field(default=None, init=False, repr=False)
    _recommendations: dict[str, str] | None = field(default=None, init=False, repr=False)

    @property
    def artifacts(self) -> set[str]:
        if self._artifacts is None:
            self._artifacts = set(self.resolve_artifacts())
        return self._artifacts

    @property
    def recommendations(self) -> dict[str, str]:
        if self._recommendations is None:
            self._recommendations = dict(self.load_recommendations())
        return self._recommendations


def _run_no_unused_pin(context: CheckContext) -> CheckResult:
    if not context.pins:
        return CheckResult.passed(CHECK_NO_UNUSED_PIN)
    return check_no_unused_pin(context.pins, context.artifacts)


def _run_no_bom_conflict(context: CheckContext) -> CheckResult:
    if not context.pins:
        return CheckResult.passed(CHECK_NO_BOM_CONFLICT)
    return check_no_bom_conflict(
        context.pins, context.recommendations, fail_on_redundant=context.fail_on_redundant_pins
    )


CHECKS: dict[str, Callable[[CheckContext], CheckResult]] = {
    CHECK_NO_UNUSED_PIN: _run_no_unused_pin,
    CHECK_NO_BOM_CONFLICT: _run_no_bom_conflict,
}


def run_checks(names: Sequence[str] | None, context: CheckContext) -> list[CheckResult]:
    """Run the named checks in order.

    Args:
        names: Check names, or None for every check
        context: Inputs for this run

    Returns:
        One CheckResult per check

    Raises:
        ValueError: If a check name is unknown
        ResolutionFailure: If an input collaborator fails
    """
    selected = list(names) if names else list(ALL_CHECKS)
    unknown = [n for n in selected if n not in CHECKS]
    if unknown:
        raise ValueError(f"Unknown check(s): {', '.join(unknown)}. Available: {', '.join(CHECKS)}")

    results = []
    for name in selected:
        result = CHECKS[name](context)
        logger.debug(f"{name}: {result.status.value}")
        results.append(result)
    return results


def raise_for_results(results: Sequence[CheckResult]) -> None:
    """Raise one ValidationFailure combining every failed check."""
    failed = [r for r in results if not r.ok]
    if not failed:
        return
    if len(failed) == 1:
        failed[0].raise_for_status()

    entries = []
    for result in failed:
        entries.append(result.header.rstrip())
        entries.extend(result.entries)
    raise ValidationFailure(
        "check", f"{len(failed)} versions.props checks failed:", entries
    )


__all__ = [
    "CHECKS",
    "CheckContext",
    "check_no_bom_conflict",
    "check_no_unused_pin",
    "find_bom_conflicts",
    "find_unused_pins",
    "raise_for_results",
    "run_checks",
]
