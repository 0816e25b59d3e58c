"""Custom exceptions for tsconfig-includes."""

from pathlib import Path


class TsconfigIncludesError(Exception):
    """Base exception for tsconfig-includes."""

    # Set by the aggregator when the failure belongs to one package
    package_name: str | None = None


class LayoutError(TsconfigIncludesError):
    """The monorepo layout violates a structural assumption."""


class EnvironmentFailure(TsconfigIncludesError):
    """A file, binary or process in the environment failed."""


class PackageAtMonorepoRootError(LayoutError):
    """A package's configuration or manifest sits at the monorepo root."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Unexpected package in monorepo root: {path}")


class UnknownPackageError(LayoutError):
    """A requested project's package is not registered in the monorepo."""

    def __init__(self, name: str | None, tsconfig_file: Path):
        self.name = name
        self.tsconfig_file = tsconfig_file
        if name is None:
            message = f"No package of the monorepo contains {tsconfig_file}"
        else:
            message = (
                f"Package '{name}' (from {tsconfig_file}) is not a package of the monorepo"
            )
        super().__init__(message)


class PathNormalizationError(LayoutError):
    """A path expected under the monorepo root cannot be rebased onto it."""

    def __init__(self, path: Path, monorepo_root: Path):
        self.path = path
        self.monorepo_root = monorepo_root
        super().__init__(f"Cannot make {path} relative to monorepo root {monorepo_root}")


class ConfigDecodeError(EnvironmentFailure):
    """Configuration file is missing, unreadable or malformed."""

    def __init__(self, path: Path, cause: Exception | str):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to decode {path}: {cause}")


class PackageManifestReadError(EnvironmentFailure):
    """A package.json is missing, unreadable or has no name."""

    def __init__(self, path: Path, cause: Exception | str):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to read package manifest {path}: {cause}")


class MonorepoManifestError(EnvironmentFailure):
    """The workspace definition of the monorepo is missing or invalid."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid monorepo manifest {path}: {reason}")


class MonorepoRootNotFoundError(EnvironmentFailure):
    """No monorepo root above a starting path."""

    def __init__(self, start: Path):
        self.start = start
        super().__init__(f"Project is not in a monorepo: {start}")


class CanonicalizeError(EnvironmentFailure):
    """The monorepo root cannot be resolved to a canonical path."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to canonicalize path {path}: {cause}")


class WalkError(EnvironmentFailure):
    """A directory under a package cannot be read while matching includes."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to read directory {path}: {cause}")


class ProcessSpawnError(EnvironmentFailure):
    """The TypeScript compiler process could not be started."""

    def __init__(self, command: list[str], cause: OSError):
        self.command = command
        self.cause = cause
        super().__init__(f"Unable to spawn {' '.join(command)}: {cause}")


class CompilerInvocationError(EnvironmentFailure):
    """The TypeScript compiler exited with a non-zero status."""

    def __init__(self, command: list[str], stderr: bytes, returncode: int | None = None):
        self.command = command
        self.stderr = stderr
        self.returncode = returncode
        message = f"tsc exited with non-zero status code for command {' '.join(command)}"
        if returncode is not None:
            message += f" (exit status {returncode})"
        details = stderr.decode("utf-8", errors="replace").strip()
        if details:
            message += f":\n{details}"
        super().__init__(message)


class CompilerTimeoutError(EnvironmentFailure):
    """The TypeScript compiler did not finish in time."""

    def __init__(self, command: list[str], timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"{' '.join(command)} timed out after {timeout:g} seconds")


class OutputDecodeError(EnvironmentFailure):
    """The TypeScript compiler emitted output that is not valid UTF-8."""

    def __init__(self, command: list[str], cause: UnicodeDecodeError):
        self.command = command
        self.cause = cause
        super().__init__(f"Output of {' '.join(command)} included invalid UTF-8: {cause}")
