"""Gradle lockfile resolver plugin.

Reads the dependency lock state that Gradle writes with
'./gradlew dependencies --write-locks'. Every directory holding a
gradle.lockfile (or a legacy gradle/dependency-locks/ directory) is treated
as one project of the build; only resolvable configurations are ever locked,
so every configuration found is resolvable.

Project paths use Gradle's syntax: ':' for the root project and ':a:b' for
the project in directory a/b.
"""

from pathlib import Path
from typing import Any

from versions_check import hookimpl
from versions_check.logging import get_logger
from versions_check.parsers.gradle_lockfile import parse_gradle_lockfile, parse_legacy_lockfile

logger = get_logger(__name__)

RESOLVER_NAME = "gradle-lockfile"

LOCKFILE_NAME = "gradle.lockfile"
LEGACY_LOCKS_DIR = Path("gradle") / "dependency-locks"
LEGACY_SUFFIX = ".lockfile"

# Directories never searched for lock state
SKIP_DIRS = {"build", "out", "node_modules"}


def _project_path(root_dir: Path, project_dir: Path) -> str:
    parts = project_dir.relative_to(root_dir).parts
    return ":" + ":".join(parts)


def _project_dir(root_dir: Path, project: str) -> Path:
    parts = [p for p in project.split(":") if p]
    return root_dir.joinpath(*parts)


def _legacy_lockfiles(project_dir: Path) -> list[Path]:
    locks_dir = project_dir / LEGACY_LOCKS_DIR
    if not locks_dir.is_dir():
        return []
    return sorted(p for p in locks_dir.iterdir() if p.suffix == LEGACY_SUFFIX and p.is_file())


def find_project_dirs(root_dir: Path) -> list[Path]:
    """Find every directory under root_dir that holds Gradle lock state.

    Args:
        root_dir: Root of the multi-project build

    Returns:
        Sorted project directories, root first when it has lock state
    """
    found = set()
    for dirpath, dirnames, filenames in root_dir.walk():
        # Pruned in place so skipped trees are never descended into
        dirnames[:] = [d for d in dirnames if d not in SKIP_DIRS and not d.startswith(".")]
        if LOCKFILE_NAME in filenames or (dirpath / LEGACY_LOCKS_DIR).is_dir():
            found.add(dirpath)

    return sorted(found, key=lambda d: d.relative_to(root_dir).parts)


def _configuration_names(lockfile: Path) -> list[str]:
    """Configuration names listed in a lockfile; malformed lines are left to resolution."""
    names: list[str] = []
    for line in lockfile.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        for conf in line.partition("=")[2].split(","):
            conf = conf.strip()
            if conf and conf not in names:
                names.append(conf)
    return sorted(names)


@hookimpl
def register_artifact_resolvers() -> dict:
    """Register the Gradle lockfile resolver."""
    return {
        "name": RESOLVER_NAME,
        "description": "Gradle dependency lock state (gradle.lockfile)",
        "build_files": [LOCKFILE_NAME, str(LEGACY_LOCKS_DIR / f"*{LEGACY_SUFFIX}")],
        "available": True,
    }


@hookimpl
def list_configurations(resolver_name: str, root_dir: Path, options: dict[str, Any]) -> list[dict] | None:
    """List the locked configurations of every project."""
    if resolver_name != RESOLVER_NAME:
        return None

    configurations = []
    for project_dir in find_project_dirs(root_dir):
        project = _project_path(root_dir, project_dir)

        names: list[str] = []
        lockfile = project_dir / LOCKFILE_NAME
        if lockfile.is_file():
            names.extend(_configuration_names(lockfile))
        for legacy in _legacy_lockfiles(project_dir):
            if legacy.stem not in names:
                names.append(legacy.stem)

        for name in names:
            configurations.append({"project": project, "configuration": name, "resolvable": True})

    if not configurations:
        logger.warning(f"No Gradle lock state found under {root_dir}")

    return configurations


@hookimpl
def resolve_configuration(
    resolver_name: str,
    root_dir: Path,
    project: str,
    configuration: str,
    options: dict[str, Any],
) -> list[str] | None:
    """Return the locked coordinates of one configuration."""
    if resolver_name != RESOLVER_NAME:
        return None

    project_dir = _project_dir(root_dir, project)
    coordinates: set[str] = set()

    lockfile = project_dir / LOCKFILE_NAME
    if lockfile.is_file():
        coordinates |= parse_gradle_lockfile(lockfile).get(configuration, set())

    legacy = project_dir / LEGACY_LOCKS_DIR / f"{configuration}{LEGACY_SUFFIX}"
    if legacy.is_file():
        coordinates |= parse_legacy_lockfile(legacy)

    return sorted(coordinates)
