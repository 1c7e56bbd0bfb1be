"""Exceptions raised by versions-check.

All of them are terminal for the run that encounters them. The checks are
deterministic, so nothing is retried.
"""

from __future__ import annotations

from pathlib import Path


class VersionsCheckError(Exception):
    """Base class for versions-check failures."""


class ConfigurationMissing(VersionsCheckError):
    """A required input file is missing or unreadable."""

    def __init__(self, path: Path, reason: str | None = None):
        self.path = path
        message = f"No {path} file found"
        if reason:
            message = f"Error reading {path} file: {reason}"
        super().__init__(message)


class ResolutionFailure(VersionsCheckError):
    """Artifact resolution failed for a project configuration."""

    def __init__(self, message: str, project: str | None = None, configuration: str | None = None):
        self.project = project
        self.configuration = configuration
        super().__init__(message)

    @classmethod
    def for_configuration(cls, project: str, configuration: str) -> ResolutionFailure:
        return cls(
            f"Error during resolution of the artifacts of configuration "
            f"'{configuration}' in project '{project}'",
            project=project,
            configuration=configuration,
        )


class ValidationFailure(VersionsCheckError):
    """One or more pins failed a check.

    Every offending entry is carried so a single run reports all of them.
    """

    def __init__(self, check_name: str, header: str, entries: list[str]):
        self.check_name = check_name
        self.header = header
        self.entries = list(entries)
        super().__init__(header + "\n" + "\n".join(self.entries))


class InvalidPinPattern(VersionsCheckError):
    """A pin pattern does not compile as a regular expression."""

    def __init__(self, pattern: str, line: int, reason: str):
        self.pattern = pattern
        self.line = line
        super().__init__(f"Invalid pin pattern '{pattern}' on line {line} of versions.props: {reason}")
