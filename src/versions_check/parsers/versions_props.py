"""Parser for versions.props pin files.

Grammar, one directive per line:

    <group>:<name> = <version>    # optional trailing comment
    com.example:* = 1.2.3         # '*' matches any run of characters
    # linter:OFF                  # lines after this are not validated
    # linter:ON                   # ...until this marker

Lines that do not match the pin grammar are ignored.
"""

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from versions_check.config import LINTER_OFF_MARKER, LINTER_ON_MARKER, PIN_PATTERN
from versions_check.errors import ConfigurationMissing
from versions_check.logging import get_logger
from versions_check.models.pin import Pin

logger = get_logger(__name__)

PIN_REGEX = re.compile(PIN_PATTERN)


def iter_versions_props_lines(lines: Iterable[str]) -> Iterator[Pin]:
    """Yield the pins of active lines, in order.

    Args:
        lines: Raw file lines, with or without line terminators

    Yields:
        Pin for every active line matching the pin grammar
    """
    active = True
    for number, raw in enumerate(lines, start=1):
        raw = raw.rstrip("\r\n")
        if raw == LINTER_ON_MARKER:
            active = True
        elif raw == LINTER_OFF_MARKER:
            active = False

        if not active:
            continue

        # First '#' wins, even inside a version string
        line = raw.split("#", 1)[0].rstrip()
        match = PIN_REGEX.fullmatch(line)
        if match is None:
            if line.strip():
                logger.debug(f"Ignoring line {number}: {raw!r}")
            continue

        yield Pin(pattern=match.group(1), version=match.group(2), line=number)


def parse_versions_props(path: Path) -> list[Pin]:
    """Parse a versions.props file.

    Args:
        path: Path to versions.props

    Returns:
        Pins in file order, duplicates preserved

    Raises:
        ConfigurationMissing: If the file doesn't exist or cannot be read
    """
    if not path.exists():
        raise ConfigurationMissing(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationMissing(path, reason=str(e)) from e

    pins = list(iter_versions_props_lines(text.splitlines()))
    logger.debug(f"Read {len(pins)} pin(s) from {path}")
    return pins
