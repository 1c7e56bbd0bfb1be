"""No-BOM-conflict check.

Compares pins against versions recommended by imported BOMs. A pin that
forces a different version than a BOM is an override conflict; a pin that
repeats the BOM version is redundant.
"""

from collections.abc import Mapping, Sequence

from versions_check.config import CHECK_NO_BOM_CONFLICT
from versions_check.logging import get_logger
from versions_check.models.check import CheckResult
from versions_check.models.pin import Conflict, ConflictKind, Pin

logger = get_logger(__name__)

BOM_CONFLICTS_HEADER = "There are conflicts between versions.props and the BOMs: "


def find_bom_conflicts(pins: Sequence[Pin], recommendations: Mapping[str, str]) -> list[Conflict]:
    """Find every recommended artifact covered by a pin.

    Args:
        pins: Pins in file order
        recommendations: 'group:name' to BOM version

    Returns:
        Conflicts in pin order, then artifact order
    """
    conflicts = []
    artifacts = sorted(recommendations)
    for pin in pins:
        regex = pin.regex
        for artifact in artifacts:
            if regex.fullmatch(artifact):
                conflicts.append(Conflict(pin=pin, artifact=artifact, bom_version=recommendations[artifact]))
    return conflicts


def check_no_bom_conflict(
    pins: Sequence[Pin],
    recommendations: Mapping[str, str],
    fail_on_redundant: bool = False,
) -> CheckResult:
    """Run the BOM-conflict check.

    Override conflicts always fail. Redundant pins fail only when
    fail_on_redundant is set; otherwise they are returned as warnings.
    """
    conflicts = find_bom_conflicts(pins, recommendations)
    overrides = [c.describe() for c in conflicts if c.kind is ConflictKind.OVERRIDE]
    redundant = [c.describe() for c in conflicts if c.kind is ConflictKind.REDUNDANT]

    if fail_on_redundant:
        failures, warnings = [c.describe() for c in conflicts], []
    else:
        failures, warnings = overrides, redundant

    for message in warnings:
        logger.warning(message)

    if failures:
        return CheckResult.failed(CHECK_NO_BOM_CONFLICT, BOM_CONFLICTS_HEADER, failures, warnings)
    return CheckResult.passed(CHECK_NO_BOM_CONFLICT, warnings)
