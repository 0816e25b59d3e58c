"""Data models for tsconfig-includes."""

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from pathlib import Path
from typing import Self

from tsconfig_includes.files.paths import PACKAGE_MANIFEST_FILENAME
from tsconfig_includes.files.paths import glob_file_extension
from tsconfig_includes.files.paths import is_glob

BASE_FILE_EXTENSIONS = (".ts", ".tsx", ".d.ts")
JAVASCRIPT_FILE_EXTENSIONS = (".js", ".jsx")

DEPENDENCY_FIELDS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)

# Package name -> sorted paths relative to the monorepo root
ResolvedFileSet = dict[str, list[Path]]


class Calculation(str, Enum):
    """How to enumerate the files of a TypeScript project."""

    ESTIMATE = "estimate"
    EXACT = "exact"


@dataclass(frozen=True)
class CompilerOptions:
    """The subset of tsconfig compilerOptions that affects file inclusion."""

    allow_js: bool = False
    resolve_json_module: bool = False

    @classmethod
    def from_dict(cls, data: Mapping) -> Self:
        """Create from the compilerOptions object of a tsconfig.json."""
        allow_js = data.get("allowJs", False)
        resolve_json_module = data.get("resolveJsonModule", False)
        if not isinstance(allow_js, bool):
            raise ValueError(f"compilerOptions.allowJs must be a boolean, got {allow_js!r}")
        if not isinstance(resolve_json_module, bool):
            raise ValueError(
                "compilerOptions.resolveJsonModule must be a boolean, "
                f"got {resolve_json_module!r}"
            )
        return cls(allow_js=allow_js, resolve_json_module=resolve_json_module)


@dataclass(frozen=True)
class ProjectConfiguration:
    """A decoded tsconfig.json."""

    compiler_options: CompilerOptions = field(default_factory=CompilerOptions)
    include: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping) -> Self:
        """Create from dict loaded from JSON.

        A missing "include" key yields an empty include list.

        Raises:
            ValueError: If a known field has the wrong shape
        """
        compiler_options = data.get("compilerOptions", {})
        if not isinstance(compiler_options, Mapping):
            raise ValueError("compilerOptions must be an object")

        include = data.get("include", [])
        if not isinstance(include, list) or not all(
            isinstance(pattern, str) for pattern in include
        ):
            raise ValueError("include must be an array of strings")

        return cls(
            compiler_options=CompilerOptions.from_dict(compiler_options),
            include=tuple(include),
        )

    def whitelisted_file_extensions(self) -> frozenset[str]:
        """Get the file suffixes the compiler accepts for this project.

        The TypeScript compiler only includes files with supported extensions
        when a glob does not name one (.ts, .tsx and .d.ts, plus .js and .jsx
        with allowJs). Globs naming a suffix, like "src/**/*.worker.js", add
        that suffix. JSON suffixes stay gated by resolveJsonModule.

        Suffixes apply to every glob, not only to the glob that named them.
        """
        whitelist = set(BASE_FILE_EXTENSIONS)
        if self.compiler_options.allow_js:
            whitelist.update(JAVASCRIPT_FILE_EXTENSIONS)

        for pattern in self.include:
            if not is_glob(pattern):
                continue
            extension = glob_file_extension(pattern)
            if extension:
                whitelist.add(extension)

        return frozenset(
            extension
            for extension in whitelist
            if not extension.endswith(".json")
            or self.compiler_options.resolve_json_module
        )


@dataclass(frozen=True, order=True)
class PackageIdentity:
    """A package to enumerate, keyed by name and tsconfig location."""

    name: str  # Scoped package name, e.g. "@scope/foo"
    tsconfig_file: Path  # Relative to the monorepo root


@dataclass(frozen=True)
class PackageManifest:
    """A package.json belonging to the monorepo workspace."""

    name: str
    directory: Path  # Relative to the monorepo root
    dependency_names: frozenset[str] = frozenset()

    @classmethod
    def from_dict(cls, data: Mapping, directory: Path) -> Self:
        """Create from a package.json dict found in directory.

        Raises:
            ValueError: If the manifest has no string name
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("package.json has no 'name'")

        dependency_names: set[str] = set()
        for dependency_field in DEPENDENCY_FIELDS:
            declared = data.get(dependency_field) or {}
            if isinstance(declared, Mapping):
                dependency_names.update(declared)

        return cls(
            name=name,
            directory=directory,
            dependency_names=frozenset(dependency_names),
        )

    @property
    def manifest_file(self) -> Path:
        """Get the package.json path relative to the monorepo root."""
        return self.directory / PACKAGE_MANIFEST_FILENAME

    def transitive_internal_dependencies(
        self, packages_by_name: Mapping[str, "PackageManifest"]
    ) -> list["PackageManifest"]:
        """Collect internal dependencies, following edges transitively.

        Args:
            packages_by_name: Every package of the monorepo, by name

        Returns:
            Dependencies in breadth-first order, excluding this package even
            when a cycle leads back to it. Names absent from packages_by_name
            are external dependencies and are ignored.
        """
        seen = {self.name}
        result = []
        queue = [self]
        while queue:
            current = queue.pop(0)
            for name in sorted(current.dependency_names):
                if name in seen or name not in packages_by_name:
                    continue
                seen.add(name)
                dependency = packages_by_name[name]
                result.append(dependency)
                queue.append(dependency)
        return result
