"""Pin and BOM conflict models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from versions_check.errors import InvalidPinPattern
from versions_check.utils import glob_to_regex


@dataclass(frozen=True)
class Pin:
    """A forced version for one artifact or artifact pattern.

    Attributes:
        pattern: 'group:name' coordinate, optionally containing '*' wildcards
        version: Opaque version string
        line: 1-based line number in versions.props (0 when not read from a file)
    """

    pattern: str
    version: str
    line: int = field(default=0, compare=False)

    @property
    def regex(self) -> re.Pattern[str]:
        """Compiled pattern; use fullmatch().

        Raises:
            InvalidPinPattern: If the pattern is not a valid regex
        """
        try:
            return glob_to_regex(self.pattern)
        except re.error as e:
            raise InvalidPinPattern(self.pattern, self.line, str(e)) from e

    def __str__(self) -> str:
        return f"{self.pattern} = {self.version}"


class ConflictKind(Enum):
    """How a pin relates to a BOM-managed version.

    Values:
        OVERRIDE: The pin forces a different version than the BOM
        REDUNDANT: The pin repeats the BOM version and can be removed
    """

    OVERRIDE = "override"
    REDUNDANT = "redundant"


@dataclass(frozen=True)
class Conflict:
    """A pin that matches an artifact managed by an imported BOM."""

    pin: Pin
    artifact: str
    bom_version: str

    @property
    def kind(self) -> ConflictKind:
        if self.pin.version == self.bom_version:
            return ConflictKind.REDUNDANT
        return ConflictKind.OVERRIDE

    def describe(self) -> str:
        """Single-line description used in failure reports."""
        if self.kind is ConflictKind.REDUNDANT:
            return f"{self.pin} is already recommended by a BOM for {self.artifact}"
        return f"{self.pin} conflicts with {self.artifact} = {self.bom_version} from BOM"
