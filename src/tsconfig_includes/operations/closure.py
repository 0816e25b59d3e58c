"""Resolve requested projects to the packages whose files must be enumerated."""

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from pathlib import Path

from tsconfig_includes.configuration import read_package_name
from tsconfig_includes.exceptions import PackageAtMonorepoRootError
from tsconfig_includes.exceptions import UnknownPackageError
from tsconfig_includes.files.paths import PACKAGE_MANIFEST_FILENAME
from tsconfig_includes.files.paths import TSCONFIG_FILENAME
from tsconfig_includes.files.paths import package_directory
from tsconfig_includes.manifest import MonorepoManifest
from tsconfig_includes.models import PackageIdentity
from tsconfig_includes.models import PackageManifest

logger = logging.getLogger(__name__)


def package_identity(package: PackageManifest) -> PackageIdentity:
    """Identify a package by name and its tsconfig.json location.

    Raises:
        PackageAtMonorepoRootError: If the package lives at the monorepo root
    """
    if package.directory in (Path("."), Path("")):
        raise PackageAtMonorepoRootError(package.manifest_file)
    return PackageIdentity(
        name=package.name, tsconfig_file=package.directory / TSCONFIG_FILENAME
    )


def inclusive_closure(
    package: PackageManifest, packages_by_name: Mapping[str, PackageManifest]
) -> set[PackageIdentity]:
    """Get a package and all of its internal dependencies, transitively."""
    dependencies = package.transitive_internal_dependencies(packages_by_name)
    return {package_identity(p) for p in [*dependencies, package]}


def resolve_packages(
    monorepo_root: Path,
    tsconfig_files: Iterable[Path],
    manifest: MonorepoManifest,
) -> frozenset[PackageIdentity]:
    """Resolve requested tsconfig files to the packages to enumerate.

    Each tsconfig's package is identified by the name in its sibling
    package.json. The result contains every requested package plus its
    transitive internal dependencies, each exactly once.

    Args:
        monorepo_root: Monorepo root directory
        tsconfig_files: Configuration paths relative to monorepo_root
        manifest: Packages of the monorepo

    Returns:
        Union of the inclusive closures of every requested project

    Raises:
        PackageAtMonorepoRootError: If a tsconfig or package sits at the root
        PackageManifestReadError: If a sibling package.json cannot be read
        UnknownPackageError: If a package name is not in the manifest
    """
    packages_by_name = manifest.packages_by_name()
    packages: set[PackageIdentity] = set()

    for tsconfig_file in tsconfig_files:
        package_json = package_directory(tsconfig_file) / PACKAGE_MANIFEST_FILENAME
        name = read_package_name(monorepo_root / package_json)
        try:
            package = packages_by_name[name]
        except KeyError:
            raise UnknownPackageError(name, tsconfig_file) from None
        packages |= inclusive_closure(package, packages_by_name)

    logger.debug(
        "Packages to enumerate: %s", ", ".join(p.name for p in sorted(packages))
    )
    return frozenset(packages)


def owning_package(manifest: MonorepoManifest, tsconfig_file: Path) -> PackageManifest:
    """Find the package whose directory contains a tsconfig file.

    Args:
        manifest: Packages of the monorepo
        tsconfig_file: Configuration path relative to the monorepo root

    Returns:
        The package with the deepest directory containing tsconfig_file

    Raises:
        PackageAtMonorepoRootError: If tsconfig_file sits at the monorepo root
        UnknownPackageError: If no package contains tsconfig_file
    """
    directory = package_directory(tsconfig_file)
    candidates = [
        package
        for package in manifest.internal_package_manifests()
        if package.directory not in (Path("."), Path(""))
        and directory.is_relative_to(package.directory)
    ]
    if not candidates:
        raise UnknownPackageError(None, tsconfig_file)
    return max(candidates, key=lambda package: len(package.directory.parts))
