"""Monorepo workspace manifest: which packages exist and how they depend on each other."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Self

from tsconfig_includes.configuration import read_json
from tsconfig_includes.exceptions import ConfigDecodeError
from tsconfig_includes.exceptions import MonorepoManifestError
from tsconfig_includes.files.find_up import LERNA_MANIFEST_FILENAME
from tsconfig_includes.files.paths import PACKAGE_MANIFEST_FILENAME
from tsconfig_includes.files.paths import VENDOR_DIRECTORY
from tsconfig_includes.models import PackageManifest

logger = logging.getLogger(__name__)

DEFAULT_LERNA_PACKAGES = ("packages/*",)


def _read_manifest_json(path: Path) -> dict:
    try:
        data = read_json(path)
    except ConfigDecodeError as e:
        raise MonorepoManifestError(path, str(e.cause)) from e
    if not isinstance(data, dict):
        raise MonorepoManifestError(path, "expected a JSON object")
    return data


def _string_list(path: Path, key: str, value: object) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MonorepoManifestError(path, f"'{key}' must be an array of strings")
    return tuple(value)


def read_workspace_patterns(monorepo_root: Path) -> tuple[str, ...]:
    """Read the globs locating workspace packages.

    lerna.json "packages" wins; otherwise the root package.json "workspaces"
    (an array, or an object with a "packages" array) is used. A lerna.json
    declaring neither falls back to "packages/*".

    Raises:
        MonorepoManifestError: If no workspace definition exists or it is
            malformed
    """
    lerna_manifest = monorepo_root / LERNA_MANIFEST_FILENAME
    root_manifest = monorepo_root / PACKAGE_MANIFEST_FILENAME

    if lerna_manifest.is_file():
        lerna = _read_manifest_json(lerna_manifest)
        if "packages" in lerna:
            return _string_list(lerna_manifest, "packages", lerna["packages"])

    if root_manifest.is_file():
        root = _read_manifest_json(root_manifest)
        workspaces = root.get("workspaces")
        if isinstance(workspaces, Mapping):
            workspaces = workspaces.get("packages")
        if workspaces is not None:
            return _string_list(root_manifest, "workspaces", workspaces)

    if lerna_manifest.is_file():
        return DEFAULT_LERNA_PACKAGES

    raise MonorepoManifestError(
        monorepo_root, "no lerna.json or package.json workspaces found"
    )


def _expand_workspace_patterns(
    monorepo_root: Path, patterns: tuple[str, ...]
) -> list[Path]:
    """Expand workspace globs into package directories relative to the root."""
    included: set[Path] = set()
    excluded: set[Path] = set()
    for pattern in patterns:
        negated = pattern.startswith("!")
        pattern = pattern.removeprefix("!").removeprefix("./").rstrip("/")
        matches = [monorepo_root] if pattern in ("", ".") else monorepo_root.glob(pattern)
        for candidate in matches:
            if not (candidate / PACKAGE_MANIFEST_FILENAME).is_file():
                continue
            directory = candidate.relative_to(monorepo_root)
            if VENDOR_DIRECTORY in directory.parts:
                continue
            (excluded if negated else included).add(directory)
    return sorted(included - excluded)


@dataclass(frozen=True)
class MonorepoManifest:
    """Every package of a monorepo workspace. Immutable once loaded."""

    root: Path
    packages: tuple[PackageManifest, ...]

    @classmethod
    def load(cls, monorepo_root: Path) -> Self:
        """Load the workspace definition and every package.json it names.

        Raises:
            MonorepoManifestError: If the workspace definition or a package
                manifest is missing or malformed, or two packages share a name
        """
        patterns = read_workspace_patterns(monorepo_root)
        packages = []
        seen: dict[str, Path] = {}
        for directory in _expand_workspace_patterns(monorepo_root, patterns):
            manifest_file = monorepo_root / directory / PACKAGE_MANIFEST_FILENAME
            data = _read_manifest_json(manifest_file)
            try:
                package = PackageManifest.from_dict(data, directory)
            except ValueError as e:
                raise MonorepoManifestError(manifest_file, str(e)) from e
            if package.name in seen:
                raise MonorepoManifestError(
                    manifest_file,
                    f"package name '{package.name}' is also used by {seen[package.name]}",
                )
            seen[package.name] = directory
            packages.append(package)

        logger.debug(
            "Loaded %d workspace packages from %s", len(packages), monorepo_root
        )
        return cls(root=monorepo_root, packages=tuple(packages))

    def packages_by_name(self) -> Mapping[str, PackageManifest]:
        """Get a read-only index of packages by name."""
        return MappingProxyType({package.name: package for package in self.packages})

    def internal_package_manifests(self) -> tuple[PackageManifest, ...]:
        """Get every package, ordered by directory."""
        return self.packages
