"""Invoking the TypeScript compiler to list a project's files."""

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from tsconfig_includes.exceptions import CompilerInvocationError
from tsconfig_includes.exceptions import CompilerTimeoutError
from tsconfig_includes.exceptions import OutputDecodeError
from tsconfig_includes.exceptions import ProcessSpawnError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 300.0


class CompilerFileLister(Protocol):
    """Lists the files a compiler consumes for one project."""

    def list_files(self, project_dir: Path) -> list[Path]:
        """List absolute paths of every file in the compilation of project_dir."""
        ...


class TypeScriptCompiler:
    """Runs tsc with --listFilesOnly."""

    def __init__(self, executable: str = "tsc", timeout: float | None = DEFAULT_TIMEOUT):
        self.executable = executable
        self.timeout = timeout

    def command(self, project_dir: Path) -> list[str]:
        """Build the tsc command line for project_dir."""
        return [self.executable, "--listFilesOnly", "--project", str(project_dir)]

    def list_files(self, project_dir: Path) -> list[Path]:
        """List the files tsc includes when compiling project_dir.

        Args:
            project_dir: Directory holding the project's tsconfig.json

        Returns:
            Absolute paths, one per non-empty line of tsc output

        Raises:
            ProcessSpawnError: If tsc cannot be started
            CompilerTimeoutError: If tsc runs longer than the timeout
            CompilerInvocationError: If tsc exits with a non-zero status
            OutputDecodeError: If tsc output is not valid UTF-8
        """
        command = self.command(project_dir)
        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command, capture_output=True, timeout=self.timeout, check=False
            )
        except subprocess.TimeoutExpired as e:
            raise CompilerTimeoutError(command, self.timeout) from e
        except OSError as e:
            raise ProcessSpawnError(command, e) from e

        if completed.returncode != 0:
            raise CompilerInvocationError(
                command, completed.stderr, returncode=completed.returncode
            )

        try:
            stdout = completed.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise OutputDecodeError(command, e) from e

        return [Path(line) for line in stdout.splitlines() if line.strip()]
