"""Check and bootstrap outcome models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from versions_check.errors import ValidationFailure


class CheckStatus(Enum):
    """Status of a single check.

    Values:
        PASSED: No offending pins
        FAILED: At least one offending pin
    """

    PASSED = "passed"
    FAILED = "failed"


@dataclass
class CheckResult:
    """Outcome of running one check against the pin file.

    Attributes:
        name: Check name (e.g., 'no-unused-pin')
        status: Check status
        header: First line of the failure report
        entries: Offending entries, one per line of the report
        warnings: Non-fatal findings that were logged but did not fail the check
    """

    name: str
    status: CheckStatus
    header: str = ""
    entries: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def passed(cls, name: str, warnings: list[str] | None = None) -> "CheckResult":
        """Create a passing result."""
        return cls(name=name, status=CheckStatus.PASSED, warnings=list(warnings or []))

    @classmethod
    def failed(
        cls, name: str, header: str, entries: list[str], warnings: list[str] | None = None
    ) -> "CheckResult":
        """Create a failing result carrying every offending entry."""
        return cls(
            name=name,
            status=CheckStatus.FAILED,
            header=header,
            entries=list(entries),
            warnings=list(warnings or []),
        )

    @property
    def ok(self) -> bool:
        return self.status == CheckStatus.PASSED

    @property
    def message(self) -> str:
        """Newline-joined failure report, empty on success."""
        if self.ok:
            return ""
        return self.header + "\n" + "\n".join(self.entries)

    def raise_for_status(self) -> None:
        """Raise ValidationFailure if the check failed."""
        if not self.ok:
            raise ValidationFailure(self.name, self.header, self.entries)


class BootstrapStatus(Enum):
    """Status of the root pin-file bootstrap.

    Values:
        EXISTING: The pin file was already present
        CREATED: An empty pin file was created
        DEGRADED: The file was missing and could not be created; continue with zero pins
    """

    EXISTING = "existing"
    CREATED = "created"
    DEGRADED = "degraded"


@dataclass
class BootstrapResult:
    """Outcome of ensuring the root versions.props exists."""

    path: Path
    status: BootstrapStatus
    error_message: str | None = None

    @property
    def degraded(self) -> bool:
        return self.status == BootstrapStatus.DEGRADED
