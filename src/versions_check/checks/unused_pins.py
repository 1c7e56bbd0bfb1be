"""No-unused-pin check.

A pin is used when its pattern matches at least one artifact resolved
anywhere in the build.
"""

from collections.abc import Iterable, Sequence

from versions_check.config import CHECK_NO_UNUSED_PIN
from versions_check.logging import get_logger
from versions_check.models.check import CheckResult
from versions_check.models.pin import Pin

logger = get_logger(__name__)

UNUSED_PINS_HEADER = "There are unused pins in your versions.props: "


def find_unused_pins(pins: Sequence[Pin], resolved_artifacts: Iterable[str]) -> list[str]:
    """Find the patterns of pins that match no resolved artifact.

    Args:
        pins: Pins in file order
        resolved_artifacts: 'group:name' coordinates resolved in the build

    Returns:
        Unused patterns in pin order; duplicate pins each appear
    """
    artifacts = list(resolved_artifacts)
    unused = []
    for pin in pins:
        regex = pin.regex
        if not any(regex.fullmatch(artifact) for artifact in artifacts):
            unused.append(pin.pattern)
    return unused


def check_no_unused_pin(pins: Sequence[Pin], resolved_artifacts: Iterable[str]) -> CheckResult:
    """Run the unused-pin check and report every unused pattern at once."""
    unused = find_unused_pins(pins, resolved_artifacts)
    if not unused:
        logger.debug(f"All {len(pins)} pin(s) are used")
        return CheckResult.passed(CHECK_NO_UNUSED_PIN)
    return CheckResult.failed(CHECK_NO_UNUSED_PIN, UNUSED_PINS_HEADER, unused)
