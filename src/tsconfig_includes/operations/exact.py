"""Enumerate a project's files with the TypeScript compiler."""

import logging
from pathlib import Path

from tsconfig_includes.compiler import CompilerFileLister
from tsconfig_includes.exceptions import CanonicalizeError
from tsconfig_includes.files.paths import is_monorepo_file
from tsconfig_includes.files.paths import is_vendored
from tsconfig_includes.files.paths import package_directory
from tsconfig_includes.files.paths import relative_to_monorepo_root

logger = logging.getLogger(__name__)


def canonicalize(path: Path) -> Path:
    """Resolve path to an absolute path without symlinks.

    Raises:
        CanonicalizeError: If path does not exist or cannot be resolved
    """
    try:
        return path.resolve(strict=True)
    except OSError as e:
        raise CanonicalizeError(path, e) from e


def exact_includes(
    monorepo_root: Path,
    tsconfig_file: Path,
    *,
    compiler: CompilerFileLister,
    drop_vendored: bool = True,
) -> list[Path]:
    """Enumerate the files tsc includes when compiling a project.

    tsc follows imports, types and reference directives, so its file list is
    authoritative. Files outside the monorepo (like tsc's own lib.d.ts) are
    dropped.

    Args:
        monorepo_root: Monorepo root directory
        tsconfig_file: Configuration path relative to monorepo_root
        compiler: Lists the files of a project directory
        drop_vendored: If True, drop files inside node_modules directories

    Returns:
        Files relative to the canonical monorepo root, in compiler order

    Raises:
        CanonicalizeError: If monorepo_root cannot be resolved
        PackageAtMonorepoRootError: If tsconfig_file sits at the monorepo root
        PathNormalizationError: If a listed file cannot be rebased onto the root
        ProcessSpawnError, CompilerInvocationError, CompilerTimeoutError,
        OutputDecodeError: If the compiler fails
    """
    root = canonicalize(monorepo_root)
    project_dir = root / package_directory(tsconfig_file)

    included_files = []
    for path in compiler.list_files(project_dir):
        if not is_monorepo_file(root, path):
            continue
        relative_path = relative_to_monorepo_root(root, path)
        if drop_vendored and is_vendored(relative_path):
            continue
        included_files.append(relative_path)

    logger.debug("tsc listed %d monorepo files for %s", len(included_files), tsconfig_file)
    return included_files
