"""Parser for Maven BOM (bill of materials) POM files.

Only dependencyManagement entries are read. Version placeholders such as
${jackson.version} are substituted from <properties>; unknown placeholders
are left as written.
"""

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from versions_check.logging import get_logger

logger = get_logger(__name__)

# XML namespace used by Maven POM files (POM model version 4.0.0).
NS = {"m": "http://maven.apache.org/POM/4.0.0"}

PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")

# Nested property references are expanded at most this many times
MAX_SUBSTITUTION_PASSES = 10


def _find(el, tag):
    """Find a direct child element, with or without the Maven namespace."""
    result = el.find(f"m:{tag}", NS)
    if result is not None:
        return result
    return el.find(tag)


def _findall(el, tag):
    return list(el.findall(f"m:{tag}", NS)) + list(el.findall(tag))


def _text(el, tag) -> str | None:
    child = _find(el, tag)
    if child is not None and child.text:
        return child.text.strip()
    return None


def _local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _substitute(value: str, properties: dict[str, str]) -> str:
    for _ in range(MAX_SUBSTITUTION_PASSES):
        expanded = PLACEHOLDER.sub(lambda m: properties.get(m.group(1), m.group(0)), value)
        if expanded == value:
            break
        value = expanded
    return value


def _read_properties(root) -> dict[str, str]:
    properties = {}
    props_el = _find(root, "properties")
    if props_el is not None:
        for child in props_el:
            if child.text:
                properties[_local_name(child.tag)] = child.text.strip()

    parent_el = _find(root, "parent")
    version = _text(root, "version") or (_text(parent_el, "version") if parent_el is not None else None)
    group_id = _text(root, "groupId") or (_text(parent_el, "groupId") if parent_el is not None else None)
    if version:
        properties.setdefault("project.version", version)
    if group_id:
        properties.setdefault("project.groupId", group_id)
    return properties


def parse_maven_bom(pom_path: Path) -> dict[str, str]:
    """Parse a BOM POM into managed versions.

    Args:
        pom_path: Path to the BOM pom file

    Returns:
        Mapping of 'group:name' to managed version, in document order

    Raises:
        FileNotFoundError: If the POM doesn't exist
        ValueError: If the POM is not well-formed XML
    """
    if not pom_path.exists():
        raise FileNotFoundError(f"BOM not found: {pom_path}")

    try:
        root = ET.parse(pom_path).getroot()
    except ET.ParseError as e:
        raise ValueError(f"Invalid BOM {pom_path}: {e}") from e

    properties = _read_properties(root)
    managed: dict[str, str] = {}

    dm_el = _find(root, "dependencyManagement")
    if dm_el is None:
        logger.debug(f"No dependencyManagement section in {pom_path}")
        return managed

    deps_el = _find(dm_el, "dependencies")
    if deps_el is None:
        return managed

    for dep_el in _findall(deps_el, "dependency"):
        group_id = _text(dep_el, "groupId")
        artifact_id = _text(dep_el, "artifactId")
        version = _text(dep_el, "version")
        if not group_id or not artifact_id:
            continue
        if _text(dep_el, "scope") == "import":
            logger.debug(f"Skipping imported BOM {group_id}:{artifact_id} in {pom_path}")
            continue
        if not version:
            continue

        key = f"{_substitute(group_id, properties)}:{_substitute(artifact_id, properties)}"
        managed[key] = _substitute(version, properties)

    return managed
