"""Parser for Gradle dependency lock files.

A lock state file lists every resolved module once, followed by the
configurations that resolved it:

    # This is a Gradle generated file for dependency locking.
    com.google.guava:guava:31.1-jre=compileClasspath,runtimeClasspath
    empty=annotationProcessor

The special 'empty' entry names configurations that resolved nothing.
Legacy per-configuration files (gradle/dependency-locks/<conf>.lockfile)
hold bare 'group:name:version' lines.
"""

from pathlib import Path

EMPTY_ENTRY = "empty"


def _split_configurations(value: str) -> list[str]:
    return [c.strip() for c in value.split(",") if c.strip()]


def _check_coordinate(coordinate: str, path: Path, number: int) -> str:
    parts = coordinate.split(":")
    if len(parts) < 3 or not all(parts[:3]):
        raise ValueError(f"Malformed lock entry in {path} at line {number}: {coordinate!r}")
    return coordinate


def parse_gradle_lockfile(lock_file_path: Path) -> dict[str, set[str]]:
    """Parse a gradle.lockfile into resolved coordinates per configuration.

    Args:
        lock_file_path: Path to gradle.lockfile

    Returns:
        Mapping of configuration name to 'group:name:version' coordinates

    Raises:
        FileNotFoundError: If lock file doesn't exist
        ValueError: If an entry is malformed
    """
    if not lock_file_path.exists():
        raise FileNotFoundError(f"Lock file not found: {lock_file_path}")

    configurations: dict[str, set[str]] = {}
    for number, line in enumerate(lock_file_path.read_text(encoding="utf-8").splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        coordinate, sep, confs = line.partition("=")
        if not sep:
            raise ValueError(f"Malformed lock entry in {lock_file_path} at line {number}: {line!r}")

        if coordinate == EMPTY_ENTRY:
            for conf in _split_configurations(confs):
                configurations.setdefault(conf, set())
            continue

        _check_coordinate(coordinate, lock_file_path, number)
        for conf in _split_configurations(confs):
            configurations.setdefault(conf, set()).add(coordinate)

    return configurations


def parse_legacy_lockfile(lock_file_path: Path) -> set[str]:
    """Parse a per-configuration lock file from gradle/dependency-locks/.

    Args:
        lock_file_path: Path to '<configuration>.lockfile'

    Returns:
        Set of 'group:name:version' coordinates

    Raises:
        FileNotFoundError: If lock file doesn't exist
        ValueError: If an entry is malformed
    """
    if not lock_file_path.exists():
        raise FileNotFoundError(f"Lock file not found: {lock_file_path}")

    coordinates = set()
    for number, line in enumerate(lock_file_path.read_text(encoding="utf-8").splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        coordinates.add(_check_coordinate(line, lock_file_path, number))

    return coordinates
