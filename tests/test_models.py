"""Tests for data models."""

from pathlib import Path

import pytest

from tsconfig_includes.models import CompilerOptions
from tsconfig_includes.models import PackageIdentity
from tsconfig_includes.models import PackageManifest
from tsconfig_includes.models import ProjectConfiguration


class TestProjectConfiguration:
    """Tests for ProjectConfiguration.from_dict()."""

    def test_defaults_compiler_options(self):
        """Test that absent compilerOptions default to false."""
        config = ProjectConfiguration.from_dict({"include": ["src/**/*"]})

        assert config.compiler_options == CompilerOptions()
        assert config.include == ("src/**/*",)

    def test_reads_camel_case_options(self):
        """Test that camelCase keys are read and unknown keys ignored."""
        config = ProjectConfiguration.from_dict(
            {
                "compilerOptions": {
                    "allowJs": True,
                    "resolveJsonModule": True,
                    "strict": True,
                },
                "include": [],
            }
        )

        assert config.compiler_options.allow_js is True
        assert config.compiler_options.resolve_json_module is True

    def test_missing_include_is_empty(self):
        """Test that a missing include becomes an empty list."""
        config = ProjectConfiguration.from_dict({"compilerOptions": {}})

        assert config.include == ()

    @pytest.mark.parametrize(
        "data",
        [
            {"include": "src/**/*"},
            {"include": [1, 2]},
            {"compilerOptions": []},
            {"compilerOptions": {"allowJs": "yes"}},
        ],
    )
    def test_rejects_malformed_fields(self, data):
        """Test that wrongly shaped fields raise ValueError."""
        with pytest.raises(ValueError):
            ProjectConfiguration.from_dict(data)


class TestWhitelistedFileExtensions:
    """Tests for ProjectConfiguration.whitelisted_file_extensions()."""

    def test_base_extensions(self):
        """Test the default TypeScript extensions."""
        config = ProjectConfiguration(include=("src/**/*",))

        assert config.whitelisted_file_extensions() == {".ts", ".tsx", ".d.ts"}

    def test_allow_js_adds_javascript(self):
        """Test that allowJs whitelists .js and .jsx."""
        config = ProjectConfiguration(
            compiler_options=CompilerOptions(allow_js=True), include=("src/**/*",)
        )

        assert config.whitelisted_file_extensions() == {
            ".ts",
            ".tsx",
            ".d.ts",
            ".js",
            ".jsx",
        }

    def test_glob_suffix_is_whitelisted(self):
        """Test that a compound suffix after the last wildcard is added."""
        config = ProjectConfiguration(include=("src/**/*", "src/**/*.worker.js"))

        assert ".worker.js" in config.whitelisted_file_extensions()
        assert ".js" not in config.whitelisted_file_extensions()

    def test_literal_paths_add_nothing(self):
        """Test that patterns without wildcards add no suffix."""
        config = ProjectConfiguration(include=("src/index.mjs",))

        assert config.whitelisted_file_extensions() == {".ts", ".tsx", ".d.ts"}

    def test_json_gated_by_resolve_json_module(self):
        """Test that a glob naming .json does not whitelist it on its own."""
        config = ProjectConfiguration(include=("src/**/*.json",))

        assert ".json" not in config.whitelisted_file_extensions()

    def test_json_allowed_with_resolve_json_module(self):
        """Test that resolveJsonModule keeps .json suffixes."""
        config = ProjectConfiguration(
            compiler_options=CompilerOptions(resolve_json_module=True),
            include=("src/**/*.json",),
        )

        assert ".json" in config.whitelisted_file_extensions()


class TestPackageIdentity:
    """Tests for PackageIdentity."""

    def test_equal_identities_deduplicate(self):
        """Test that equal identities collapse in a set."""
        a = PackageIdentity("foo", Path("packages/foo/tsconfig.json"))
        b = PackageIdentity("foo", Path("packages/foo/tsconfig.json"))

        assert {a, b} == {a}

    def test_identity_includes_tsconfig_path(self):
        """Test that the tsconfig path is part of the key."""
        a = PackageIdentity("foo", Path("packages/foo/tsconfig.json"))
        b = PackageIdentity("foo", Path("other/foo/tsconfig.json"))

        assert a != b


class TestPackageManifest:
    """Tests for PackageManifest."""

    def test_collects_all_dependency_fields(self):
        """Test that every dependency field contributes names."""
        manifest = PackageManifest.from_dict(
            {
                "name": "@scope/app",
                "dependencies": {"a": "1"},
                "devDependencies": {"b": "1"},
                "peerDependencies": {"c": "1"},
                "optionalDependencies": {"d": "1"},
            },
            Path("packages/app"),
        )

        assert manifest.name == "@scope/app"
        assert manifest.dependency_names == {"a", "b", "c", "d"}
        assert manifest.manifest_file == Path("packages/app/package.json")

    def test_requires_name(self):
        """Test that a manifest without a name is rejected."""
        with pytest.raises(ValueError):
            PackageManifest.from_dict({"version": "1.0.0"}, Path("packages/app"))

    def test_transitive_internal_dependencies(self):
        """Test that dependencies are followed and external names ignored."""
        a = PackageManifest("a", Path("packages/a"), frozenset({"b", "react"}))
        b = PackageManifest("b", Path("packages/b"), frozenset({"c"}))
        c = PackageManifest("c", Path("packages/c"))
        packages_by_name = {"a": a, "b": b, "c": c}

        assert a.transitive_internal_dependencies(packages_by_name) == [b, c]
        assert c.transitive_internal_dependencies(packages_by_name) == []

    def test_transitive_dependencies_survive_cycles(self):
        """Test that a dependency cycle terminates and excludes self."""
        a = PackageManifest("a", Path("packages/a"), frozenset({"b"}))
        b = PackageManifest("b", Path("packages/b"), frozenset({"a"}))
        packages_by_name = {"a": a, "b": b}

        assert a.transitive_internal_dependencies(packages_by_name) == [b]
