"""Command-line interface for tsconfig-includes."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from tsconfig_includes import __version__
from tsconfig_includes.compiler import DEFAULT_TIMEOUT
from tsconfig_includes.compiler import TypeScriptCompiler
from tsconfig_includes.exceptions import LayoutError
from tsconfig_includes.exceptions import TsconfigIncludesError
from tsconfig_includes.models import Calculation
from tsconfig_includes.operations import enumerate_by_package
from tsconfig_includes.output import print_error
from tsconfig_includes.output import print_file_sets

EXIT_ENVIRONMENT_FAILURE = 1
EXIT_LAYOUT_ERROR = 3

app = typer.Typer(help="Enumerate files used in TypeScript compilation")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tsconfig-includes {__version__}")
        raise typer.Exit()


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr: warnings, then info (-v), then debug (-vv)."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def list_includes(
    tsconfig_files: Annotated[
        list[Path],
        typer.Argument(help="tsconfig files to enumerate, relative to the monorepo root"),
    ],
    enumeration_method: Annotated[
        Calculation,
        typer.Option(help="Estimate from include globs, or ask tsc for the exact list"),
    ],
    monorepo_root: Annotated[
        Path,
        typer.Option(
            exists=True, file_okay=False, help="Path to monorepo root directory"
        ),
    ],
    compiler: Annotated[
        str, typer.Option(help="TypeScript compiler executable (exact method)")
    ] = "tsc",
    timeout: Annotated[
        float, typer.Option(min=0, help="Seconds to wait for each tsc run")
    ] = DEFAULT_TIMEOUT,
    jobs: Annotated[
        int | None, typer.Option("--jobs", "-j", min=1, help="Parallel workers")
    ] = None,
    keep_node_modules: Annotated[
        bool,
        typer.Option(help="Keep files under node_modules listed by tsc"),
    ] = False,
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="More logging")
    ] = 0,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Print the files of each project and its internal dependencies as JSON."""
    configure_logging(verbose)

    try:
        file_sets = enumerate_by_package(
            monorepo_root,
            tsconfig_files,
            enumeration_method,
            compiler=TypeScriptCompiler(compiler, timeout=timeout or None),
            max_workers=jobs,
            drop_vendored=not keep_node_modules,
        )
    except LayoutError as e:
        print_error(e)
        raise typer.Exit(EXIT_LAYOUT_ERROR) from None
    except TsconfigIncludesError as e:
        print_error(e)
        raise typer.Exit(EXIT_ENVIRONMENT_FAILURE) from None

    print_file_sets(file_sets)


def main() -> None:
    """Main entry point for the tsconfig-includes CLI."""
    app()


if __name__ == "__main__":
    main()
