"""Locate the monorepo root above a path."""

import json
from pathlib import Path

from tsconfig_includes.exceptions import MonorepoRootNotFoundError

LERNA_MANIFEST_FILENAME = "lerna.json"


def _declares_workspaces(package_json: Path) -> bool:
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return False
    return isinstance(data, dict) and "workspaces" in data


def is_monorepo_root(directory: Path) -> bool:
    """Check if directory holds a lerna.json or a package.json with workspaces."""
    if (directory / LERNA_MANIFEST_FILENAME).is_file():
        return True
    return _declares_workspaces(directory / "package.json")


def find_monorepo_root(start: Path) -> Path:
    """Find the closest monorepo root at or above start.

    Args:
        start: File or directory to search upward from

    Returns:
        Absolute path of the monorepo root

    Raises:
        MonorepoRootNotFoundError: If no ancestor is a monorepo root
    """
    start = start.resolve()
    directory = start if start.is_dir() else start.parent

    for candidate in (directory, *directory.parents):
        if is_monorepo_root(candidate):
            return candidate

    raise MonorepoRootNotFoundError(start)
