"""Top-level operations: enumerate projects and their internal dependencies."""

import logging
from collections.abc import Iterable
from pathlib import Path

from tsconfig_includes.compiler import CompilerFileLister
from tsconfig_includes.files.find_up import find_monorepo_root
from tsconfig_includes.files.paths import to_monorepo_relative
from tsconfig_includes.manifest import MonorepoManifest
from tsconfig_includes.models import Calculation
from tsconfig_includes.models import ResolvedFileSet
from tsconfig_includes.operations.aggregate import aggregate
from tsconfig_includes.operations.closure import inclusive_closure
from tsconfig_includes.operations.closure import owning_package
from tsconfig_includes.operations.closure import resolve_packages

logger = logging.getLogger(__name__)


def enumerate_by_package(
    monorepo_root: Path,
    tsconfig_files: Iterable[Path],
    calculation: Calculation,
    *,
    compiler: CompilerFileLister | None = None,
    max_workers: int | None = None,
    drop_vendored: bool = True,
) -> ResolvedFileSet:
    """Enumerate the files compiled for projects and their internal dependencies.

    Args:
        monorepo_root: Monorepo root directory (may be relative or absolute)
        tsconfig_files: Configuration paths relative to monorepo_root
            (absolute paths inside monorepo_root are accepted)
        calculation: Estimate from include globs, or ask tsc for the exact list
        compiler: File lister for Calculation.EXACT (default: tsc on PATH)
        max_workers: Size of the worker pool
        drop_vendored: If True, exact mode drops files in node_modules

    Returns:
        Scoped package name -> sorted paths relative to monorepo_root, for
        every requested package and each of its internal dependencies

    Raises:
        TsconfigIncludesError: If the monorepo or any package cannot be
            enumerated
    """
    manifest = MonorepoManifest.load(monorepo_root)
    relative_tsconfig_files = [
        to_monorepo_relative(monorepo_root, Path(tsconfig_file))
        for tsconfig_file in tsconfig_files
    ]
    packages = resolve_packages(monorepo_root, relative_tsconfig_files, manifest)
    return aggregate(
        monorepo_root,
        packages,
        calculation,
        compiler=compiler,
        max_workers=max_workers,
        drop_vendored=drop_vendored,
    )


def enumerate_project(
    tsconfig_file: Path,
    calculation: Calculation,
    *,
    compiler: CompilerFileLister | None = None,
    max_workers: int | None = None,
    drop_vendored: bool = True,
) -> ResolvedFileSet:
    """Enumerate one project's files without knowing the monorepo root.

    The monorepo root is the closest ancestor holding a lerna.json or a
    package.json with workspaces. The owning package is the one whose
    directory contains tsconfig_file.

    Args:
        tsconfig_file: Path to the project's tsconfig (relative to the
            working directory, or absolute)
        calculation: Estimate from include globs, or ask tsc for the exact list

    Returns:
        Same as enumerate_by_package()

    Raises:
        MonorepoRootNotFoundError: If tsconfig_file is not inside a monorepo
        UnknownPackageError: If no workspace package contains tsconfig_file
        TsconfigIncludesError: If any package cannot be enumerated
    """
    tsconfig_file = Path(tsconfig_file).resolve()
    monorepo_root = find_monorepo_root(tsconfig_file)
    logger.debug("Monorepo root of %s is %s", tsconfig_file, monorepo_root)

    manifest = MonorepoManifest.load(monorepo_root)
    package = owning_package(manifest, to_monorepo_relative(monorepo_root, tsconfig_file))
    packages = inclusive_closure(package, manifest.packages_by_name())
    return aggregate(
        monorepo_root,
        packages,
        calculation,
        compiler=compiler,
        max_workers=max_workers,
        drop_vendored=drop_vendored,
    )
