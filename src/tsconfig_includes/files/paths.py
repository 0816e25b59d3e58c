"""Path normalization and validation utilities."""

import os
from pathlib import Path

from tsconfig_includes.exceptions import PackageAtMonorepoRootError
from tsconfig_includes.exceptions import PathNormalizationError

TSCONFIG_FILENAME = "tsconfig.json"
PACKAGE_MANIFEST_FILENAME = "package.json"
VENDOR_DIRECTORY = "node_modules"


def is_glob(pattern: str) -> bool:
    """Check if an include pattern contains a wildcard."""
    return "*" in pattern


def glob_file_extension(glob: str) -> str | None:
    """Get the literal suffix after the last wildcard of a glob.

    Args:
        glob: Include pattern containing at least one "*"

    Returns:
        The suffix, e.g. ".worker.js" for "src/**/*.worker.js", or None when
        the glob ends in a wildcard
    """
    if glob.endswith("*"):
        return None
    return glob.rsplit("*", 1)[-1]


def package_directory(tsconfig_file: Path) -> Path:
    """Get the package directory containing a tsconfig file.

    Args:
        tsconfig_file: Configuration path relative to the monorepo root

    Returns:
        Directory of the package, relative to the monorepo root

    Raises:
        PackageAtMonorepoRootError: If tsconfig_file sits at the monorepo root
    """
    normalized = Path(os.path.normpath(tsconfig_file))
    parent = normalized.parent
    if parent == Path(".") or parent == normalized:
        raise PackageAtMonorepoRootError(tsconfig_file)
    return parent


def is_monorepo_file(monorepo_root: Path, path: Path) -> bool:
    """Check if path lies strictly under the monorepo root."""
    return path != monorepo_root and path.is_relative_to(monorepo_root)


def relative_to_monorepo_root(monorepo_root: Path, path: Path) -> Path:
    """Rebase an absolute path onto the monorepo root.

    Raises:
        PathNormalizationError: If path is not strictly under monorepo_root
    """
    if not is_monorepo_file(monorepo_root, path):
        raise PathNormalizationError(path, monorepo_root)
    return path.relative_to(monorepo_root)


def is_vendored(relative_path: Path) -> bool:
    """Check if a monorepo-relative path lies in a node_modules directory."""
    return VENDOR_DIRECTORY in relative_path.parts


def to_monorepo_relative(monorepo_root: Path, path: Path) -> Path:
    """Normalize a caller-supplied path to be relative to the monorepo root.

    Args:
        monorepo_root: Monorepo root directory
        path: Path relative to monorepo_root, or absolute and inside it

    Raises:
        PathNormalizationError: If an absolute path lies outside monorepo_root
    """
    if not path.is_absolute():
        return path
    root = monorepo_root.resolve()
    try:
        return path.resolve().relative_to(root)
    except ValueError:
        raise PathNormalizationError(path, root) from None
