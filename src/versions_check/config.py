"""Configuration constants and settings loading for versions-check."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

# Version
__version__ = "0.3.0"

VERSIONS_PROPS_FILENAME = "versions.props"
"""Pin file name, resolved against the project root"""

CONFIG_FILENAME = "versions-check.toml"
"""Optional settings file at the project root"""

CONFIG_SECTION = "versions-check"
"""Top-level table read from the settings file"""

# Linter markers are matched exactly, without stripping whitespace
LINTER_ON_MARKER = "# linter:ON"
LINTER_OFF_MARKER = "# linter:OFF"

PIN_PATTERN = r"([^:=\s]+:[^:=\s]+)\s*=\s*([^\s]+)"
"""Full-match pattern for an active versions.props line"""

DEFAULT_RESOLVER = "gradle-lockfile"
"""Resolver used when none is configured"""

# Check names, in the order the aggregate step runs them
CHECK_NO_UNUSED_PIN = "no-unused-pin"
CHECK_NO_BOM_CONFLICT = "no-bom-conflict"
ALL_CHECKS = (CHECK_NO_UNUSED_PIN, CHECK_NO_BOM_CONFLICT)


@dataclass
class Settings:
    """Effective settings for one validation run."""

    root_dir: Path
    """Root of the multi-project build"""

    versions_props: Path
    """Location of the root pin file"""

    resolver: str = DEFAULT_RESOLVER
    """Name of the artifact resolver plugin"""

    resolver_options: dict[str, Any] = field(default_factory=dict)
    """Plugin-specific options passed through to the resolver"""

    boms: list[Path] = field(default_factory=list)
    """BOM files whose managed versions are checked for conflicts"""

    fail_on_redundant_pins: bool = False
    """Fail the BOM check when a pin repeats the BOM version"""

    @classmethod
    def from_dict(cls, root_dir: Path, data: dict[str, Any]) -> Settings:
        """Create Settings from a parsed [versions-check] table.

        Relative paths are resolved against root_dir.

        Raises:
            ValueError: If a value has the wrong type
        """
        boms = data.get("boms", [])
        if not isinstance(boms, list):
            raise ValueError(f"'boms' must be a list of paths, got {type(boms).__name__}")

        resolver_options = data.get("resolver-options", {})
        if not isinstance(resolver_options, dict):
            raise ValueError("'resolver-options' must be a table")

        return cls(
            root_dir=root_dir,
            versions_props=root_dir / data.get("versions-props", VERSIONS_PROPS_FILENAME),
            resolver=data.get("resolver", DEFAULT_RESOLVER),
            resolver_options=dict(resolver_options),
            boms=[root_dir / str(b) for b in boms],
            fail_on_redundant_pins=bool(data.get("fail-on-redundant-pins", False)),
        )


def load_settings(root_dir: Path, config_path: Path | None = None) -> Settings:
    """Load settings from versions-check.toml, falling back to defaults.

    String values support ${VAR} and ${VAR:-default} expansion.

    Args:
        root_dir: Project root directory
        config_path: Explicit settings file (defaults to root_dir / CONFIG_FILENAME)

    Returns:
        Settings instance

    Raises:
        ValueError: If the settings file cannot be parsed
    """
    from versions_check.utils import expandvars_dict

    path = config_path or root_dir / CONFIG_FILENAME
    if not path.exists():
        return Settings.from_dict(root_dir, {})

    try:
        document = tomlkit.parse(path.read_text(encoding="utf-8"))
    except TOMLKitError as e:
        raise ValueError(f"Invalid settings file {path}: {e}") from e

    section = document.unwrap().get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{CONFIG_SECTION}] in {path} must be a table")

    return Settings.from_dict(root_dir, expandvars_dict(section))
