"""Output formatting for tsconfig-includes."""

import json

import typer

from tsconfig_includes.exceptions import CompilerInvocationError
from tsconfig_includes.exceptions import LayoutError
from tsconfig_includes.exceptions import TsconfigIncludesError
from tsconfig_includes.models import ResolvedFileSet


def format_file_sets(file_sets: ResolvedFileSet) -> str:
    """Serialize file sets as JSON with POSIX paths and sorted package names."""
    return json.dumps(
        {
            name: [path.as_posix() for path in files]
            for name, files in sorted(file_sets.items())
        },
        indent=2,
    )


def print_file_sets(file_sets: ResolvedFileSet) -> None:
    """Print file sets to stdout as JSON."""
    typer.echo(format_file_sets(file_sets))


def print_error(error: TsconfigIncludesError) -> None:
    """Print an enumeration error to stderr.

    Layout errors mean the repository breaks an assumption (fix the repo or
    the request); anything else is an environment failure (missing binary,
    unreadable file) that may succeed on retry.
    """
    kind = "Repository layout error" if isinstance(error, LayoutError) else "Error"
    # The compiler's stderr is printed below instead of inline
    message = str(error).split("\n", 1)[0]
    typer.secho(f"✗ {kind}: {message}", fg=typer.colors.RED, bold=True, err=True)

    if error.package_name is not None:
        typer.secho(f"   Package: {error.package_name}", err=True)
    for note in getattr(error, "__notes__", []):
        typer.secho(f"   {note}", fg=typer.colors.BRIGHT_BLACK, err=True)

    if isinstance(error, CompilerInvocationError) and error.stderr:
        typer.secho("   tsc output:", err=True)
        for line in error.stderr.decode("utf-8", errors="replace").splitlines():
            typer.secho(f"     {line}", fg=typer.colors.BRIGHT_BLACK, err=True)
