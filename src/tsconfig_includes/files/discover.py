"""File discovery by tsconfig include globs."""

from collections.abc import Sequence
from pathlib import Path

from pathspec import GitIgnoreSpec

from tsconfig_includes.exceptions import WalkError


def compile_include_patterns(patterns: Sequence[str]) -> GitIgnoreSpec:
    """Compile tsconfig include patterns into a matcher.

    Patterns use gitignore-style wildcards relative to the package directory:
    "**" spans directories, and a bare directory name includes everything
    beneath it. A leading "./" is dropped.
    """
    return GitIgnoreSpec.from_lines(
        pattern.removeprefix("./") for pattern in patterns
    )


def discover_included_files(package_dir: Path, patterns: Sequence[str]) -> list[Path]:
    """Discover regular files under package_dir matching any include pattern.

    Args:
        package_dir: Directory to walk (files directly in it are candidates)
        patterns: Include globs relative to package_dir

    Returns:
        Paths of matching files, joined onto package_dir. Symlinks are
        neither followed nor returned.

    Raises:
        WalkError: If package_dir or a directory below it cannot be listed
    """
    if not patterns:
        return []

    spec = compile_include_patterns(patterns)

    def raise_walk_error(error: OSError) -> None:
        directory = Path(error.filename) if error.filename else package_dir
        raise WalkError(directory, error) from error

    files = []
    for dirpath, dirnames, filenames in package_dir.walk(on_error=raise_walk_error):
        for filename in filenames:
            full_path = dirpath / filename
            if full_path.is_symlink() or not full_path.is_file():
                continue
            rel_path = full_path.relative_to(package_dir)
            if spec.match_file(rel_path.as_posix()):
                files.append(full_path)

    return files
