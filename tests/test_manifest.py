"""Tests for the monorepo workspace manifest."""

from pathlib import Path

import pytest

from tests.builders import add_package
from tests.builders import write_json
from tsconfig_includes.exceptions import MonorepoManifestError
from tsconfig_includes.manifest import MonorepoManifest
from tsconfig_includes.manifest import read_workspace_patterns


class TestReadWorkspacePatterns:
    """Tests for read_workspace_patterns()."""

    def test_lerna_packages(self, tmp_path):
        """Test that lerna.json packages are used."""
        write_json(tmp_path / "lerna.json", {"packages": ["packages/*", "tools/*"]})

        assert read_workspace_patterns(tmp_path) == ("packages/*", "tools/*")

    def test_lerna_without_packages_uses_workspaces(self, tmp_path):
        """Test falling back to package.json workspaces."""
        write_json(tmp_path / "lerna.json", {"version": "independent"})
        write_json(tmp_path / "package.json", {"workspaces": ["libs/*"]})

        assert read_workspace_patterns(tmp_path) == ("libs/*",)

    def test_lerna_default(self, tmp_path):
        """Test the lerna default when nothing declares packages."""
        write_json(tmp_path / "lerna.json", {"version": "independent"})

        assert read_workspace_patterns(tmp_path) == ("packages/*",)

    def test_yarn_workspaces_object(self, tmp_path):
        """Test the {"packages": [...]} form of workspaces."""
        write_json(
            tmp_path / "package.json",
            {"workspaces": {"packages": ["packages/*"], "nohoist": ["**/react"]}},
        )

        assert read_workspace_patterns(tmp_path) == ("packages/*",)

    def test_no_workspace_definition(self, tmp_path):
        """Test that a plain directory is not a monorepo."""
        write_json(tmp_path / "package.json", {"name": "single"})

        with pytest.raises(MonorepoManifestError):
            read_workspace_patterns(tmp_path)

    def test_malformed_packages(self, tmp_path):
        """Test that lerna.json packages must be a list of strings."""
        write_json(tmp_path / "lerna.json", {"packages": "packages/*"})

        with pytest.raises(MonorepoManifestError) as excinfo:
            read_workspace_patterns(tmp_path)

        assert excinfo.value.path == tmp_path / "lerna.json"


class TestMonorepoManifestLoad:
    """Tests for MonorepoManifest.load()."""

    def test_loads_packages(self, monorepo):
        """Test discovering every package and its dependencies."""
        manifest = MonorepoManifest.load(monorepo)

        packages = manifest.packages_by_name()
        assert set(packages) == {"foo", "bar"}
        assert packages["bar"].directory == Path("packages/bar")
        assert packages["bar"].dependency_names == {"foo", "lodash"}

    def test_internal_package_manifests_sorted_by_directory(self, monorepo):
        """Test that packages are ordered by directory."""
        manifest = MonorepoManifest.load(monorepo)

        directories = [p.directory for p in manifest.internal_package_manifests()]
        assert directories == [Path("packages/bar"), Path("packages/foo")]

    def test_packages_by_name_is_read_only(self, monorepo):
        """Test that the index cannot be mutated."""
        packages = MonorepoManifest.load(monorepo).packages_by_name()

        with pytest.raises(TypeError):
            packages["baz"] = packages["foo"]

    def test_ignores_directories_without_package_json(self, monorepo):
        """Test that stray directories matching the glob are skipped."""
        (monorepo / "packages" / "scratch").mkdir()

        manifest = MonorepoManifest.load(monorepo)

        assert len(manifest.packages) == 2

    def test_negated_workspace_pattern(self, tmp_path):
        """Test that "!" patterns remove packages."""
        write_json(
            tmp_path / "package.json",
            {"workspaces": ["packages/*", "!packages/legacy"]},
        )
        add_package(tmp_path, "packages/app", "app")
        add_package(tmp_path, "packages/legacy", "legacy")

        manifest = MonorepoManifest.load(tmp_path)

        assert set(manifest.packages_by_name()) == {"app"}

    def test_duplicate_names(self, tmp_path):
        """Test that two packages with one name are rejected."""
        write_json(tmp_path / "lerna.json", {"packages": ["packages/*"]})
        add_package(tmp_path, "packages/a", "same")
        add_package(tmp_path, "packages/b", "same")

        with pytest.raises(MonorepoManifestError) as excinfo:
            MonorepoManifest.load(tmp_path)

        assert "same" in str(excinfo.value)

    def test_package_without_name(self, tmp_path):
        """Test that a workspace package.json without a name is rejected."""
        write_json(tmp_path / "lerna.json", {"packages": ["packages/*"]})
        write_json(tmp_path / "packages" / "a" / "package.json", {"version": "1"})

        with pytest.raises(MonorepoManifestError):
            MonorepoManifest.load(tmp_path)
