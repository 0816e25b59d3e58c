"""Enumerate many packages in parallel and group their files by package name."""

import concurrent.futures
import logging
from collections.abc import Iterable
from pathlib import Path

from tsconfig_includes.compiler import CompilerFileLister
from tsconfig_includes.compiler import TypeScriptCompiler
from tsconfig_includes.exceptions import TsconfigIncludesError
from tsconfig_includes.models import Calculation
from tsconfig_includes.models import PackageIdentity
from tsconfig_includes.models import ResolvedFileSet
from tsconfig_includes.operations.estimate import estimate_includes
from tsconfig_includes.operations.exact import exact_includes

logger = logging.getLogger(__name__)


def enumerate_package(
    monorepo_root: Path,
    package: PackageIdentity,
    calculation: Calculation,
    *,
    compiler: CompilerFileLister | None = None,
    drop_vendored: bool = True,
) -> list[Path]:
    """Enumerate one package's files, sorted and without duplicates."""
    if calculation == Calculation.EXACT:
        if compiler is None:
            compiler = TypeScriptCompiler()
        files = exact_includes(
            monorepo_root,
            package.tsconfig_file,
            compiler=compiler,
            drop_vendored=drop_vendored,
        )
    else:
        files = estimate_includes(monorepo_root, package.tsconfig_file)
    return sorted(set(files))


def aggregate(
    monorepo_root: Path,
    packages: Iterable[PackageIdentity],
    calculation: Calculation,
    *,
    compiler: CompilerFileLister | None = None,
    max_workers: int | None = None,
    drop_vendored: bool = True,
) -> ResolvedFileSet:
    """Enumerate every package concurrently.

    Args:
        monorepo_root: Monorepo root directory
        packages: Packages to enumerate
        calculation: Which enumeration strategy to use for every package
        compiler: File lister for Calculation.EXACT (default: tsc on PATH)
        max_workers: Size of the worker pool (default: executor default)
        drop_vendored: If True, exact mode drops files in node_modules

    Returns:
        Package name -> sorted files relative to monorepo_root

    Raises:
        TsconfigIncludesError: The first package failure, with package_name
            set. Pending packages are cancelled and no partial result is
            returned.
    """
    if calculation == Calculation.EXACT and compiler is None:
        compiler = TypeScriptCompiler()

    included_files: ResolvedFileSet = {}
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(
                enumerate_package,
                monorepo_root,
                package,
                calculation,
                compiler=compiler,
                drop_vendored=drop_vendored,
            ): package
            for package in sorted(packages)
        }

        for future in concurrent.futures.as_completed(futures):
            package = futures[future]
            try:
                files = future.result()
            except TsconfigIncludesError as e:
                for pending in futures:
                    pending.cancel()
                e.package_name = package.name
                e.add_note(
                    f"while enumerating package {package.name} ({package.tsconfig_file})"
                )
                raise
            logger.debug("%s: %d files", package.name, len(files))
            included_files[package.name] = files

    return included_files
