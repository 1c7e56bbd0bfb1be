"""Parsers for pin files and build outputs."""

from versions_check.parsers.gradle_lockfile import parse_gradle_lockfile
from versions_check.parsers.maven_bom import parse_maven_bom
from versions_check.parsers.versions_props import iter_versions_props_lines, parse_versions_props

__all__ = [
    "iter_versions_props_lines",
    "parse_gradle_lockfile",
    "parse_maven_bom",
    "parse_versions_props",
]
