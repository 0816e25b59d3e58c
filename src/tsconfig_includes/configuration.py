"""Reading tsconfig.json and package.json files."""

import json
import logging
from pathlib import Path
from typing import Any

from tsconfig_includes.exceptions import ConfigDecodeError
from tsconfig_includes.exceptions import PackageManifestReadError
from tsconfig_includes.models import ProjectConfiguration

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any:
    """Read and decode a JSON file.

    Raises:
        ConfigDecodeError: If the file cannot be read or is not valid JSON
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigDecodeError(path, e) from e


def load_project_configuration(path: Path) -> ProjectConfiguration:
    """Load a tsconfig.json.

    Args:
        path: Path to the tsconfig file

    Returns:
        Decoded configuration. A file without "include" gets an empty
        include list, so no files match it.

    Raises:
        ConfigDecodeError: If the file is missing, unreadable or malformed
    """
    data = read_json(path)
    if not isinstance(data, dict):
        raise ConfigDecodeError(path, "expected a JSON object")

    if "include" not in data:
        logger.warning("%s has no 'include' globs; no files will match", path)

    try:
        return ProjectConfiguration.from_dict(data)
    except ValueError as e:
        raise ConfigDecodeError(path, e) from e


def read_package_name(path: Path) -> str:
    """Read the package name declared in a package.json.

    Raises:
        PackageManifestReadError: If the file is missing, unreadable or has
            no name
    """
    try:
        data = read_json(path)
    except ConfigDecodeError as e:
        raise PackageManifestReadError(path, e.cause) from e

    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name:
        raise PackageManifestReadError(path, "missing 'name'")
    return name
