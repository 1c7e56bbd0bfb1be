"""Utility functions for versions-check."""

from __future__ import annotations

import re
from typing import Any

from expandvars import expandvars


def expandvars_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively expand all string values in a dictionary using expandvars."""

    def expand_item(item: Any) -> Any:
        if isinstance(item, str):
            return expandvars(item)
        if isinstance(item, dict):
            return expandvars_dict(item)
        if isinstance(item, list):
            return [expand_item(i) for i in item]
        return item

    return {key: expand_item(value) for key, value in data.items()}


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a pin pattern, turning each '*' into '.*'.

    Only '*' is rewritten; other characters keep their regex meaning.
    Callers must use fullmatch() so the pattern is anchored at both ends.
    """
    return re.compile(pattern.replace("*", ".*"))


def artifact_key(coordinate: str) -> str:
    """Reduce 'group:name[:version[:classifier]]' to 'group:name'."""
    parts = coordinate.split(":")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ValueError(f"Not a group:name coordinate: {coordinate!r}")
    return f"{parts[0]}:{parts[1]}"
