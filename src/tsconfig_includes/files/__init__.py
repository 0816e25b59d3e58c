"""Filesystem operations for tsconfig-includes."""

from tsconfig_includes.files.discover import discover_included_files
from tsconfig_includes.files.find_up import find_monorepo_root
from tsconfig_includes.files.paths import is_monorepo_file
from tsconfig_includes.files.paths import is_vendored
from tsconfig_includes.files.paths import package_directory
from tsconfig_includes.files.paths import relative_to_monorepo_root
from tsconfig_includes.files.paths import to_monorepo_relative

__all__ = [
    "discover_included_files",
    "find_monorepo_root",
    "is_monorepo_file",
    "is_vendored",
    "package_directory",
    "relative_to_monorepo_root",
    "to_monorepo_relative",
]
