"""Estimate a project's files from its include globs."""

import logging
import os
from pathlib import Path

from tsconfig_includes.configuration import load_project_configuration
from tsconfig_includes.files.discover import discover_included_files
from tsconfig_includes.files.paths import is_monorepo_file
from tsconfig_includes.files.paths import package_directory
from tsconfig_includes.files.paths import relative_to_monorepo_root

logger = logging.getLogger(__name__)


def estimate_includes(monorepo_root: Path, tsconfig_file: Path) -> list[Path]:
    """Enumerate the files matched by a tsconfig's include globs.

    This is an estimate: exclude rules and files pulled in by imports are not
    considered, so the result can differ from what tsc compiles.

    Args:
        monorepo_root: Monorepo root directory
        tsconfig_file: Configuration path relative to monorepo_root

    Returns:
        Matching files relative to monorepo_root, in walk order

    Raises:
        PackageAtMonorepoRootError: If tsconfig_file sits at the monorepo root
        ConfigDecodeError: If the tsconfig cannot be loaded
        PathNormalizationError: If a match cannot be rebased onto the root
        WalkError: If a directory under the package cannot be read
    """
    root = Path(os.path.normpath(monorepo_root.absolute()))
    package_dir = Path(os.path.normpath(root / package_directory(tsconfig_file)))

    config = load_project_configuration(root / tsconfig_file)
    extensions = tuple(config.whitelisted_file_extensions())

    included_files = []
    for path in discover_included_files(package_dir, config.include):
        if not is_monorepo_file(root, path):
            continue
        # Suffix match on the whole path: ".d.ts" is not a single extension
        if not str(path).endswith(extensions):
            continue
        included_files.append(relative_to_monorepo_root(root, path))

    logger.debug("Estimated %d files for %s", len(included_files), tsconfig_file)
    return included_files
