"""
License Header Checker CLI Entry Point.

This module implements the command-line interface of the license header
checker, a tool that makes sure every source file of a project starts with the
organization's canonical license header. It turns the command line into
immutable `Options`, runs the concurrent processing pipeline over the source
tree and reports the outcome.

Each eligible file ends up in exactly one bucket:

1.  **license_ok**: the file already contains the target header.
2.  **license_added** / **skipped_add**: the file had no license header; it is
    added only with `-a`.
3.  **license_replaced** / **skipped_replace**: the file had a different license
    header; it is replaced only with `-r`.
4.  **error**: the file could not be read or written.

Usage:
    Run directly as a script or via the installed entry point.

    $ license-header-checker -a -r -i node_modules,client/assets license.txt ./src js ts

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal colors, report formatting and progress visualization.
    - Inquirer: Interactive selection of the changes to apply.
"""

from pathlib import Path
import re
from typing import Annotated

import typer
from rich import print as pr

from adapters.filesystem import FilesystemIOHandler
from constants import APP_NAME, APP_VERSION, DEFAULT_HEADER_REGEX
from core.exceptions import LicenseReadError
from core.models import Options
from core.walker import process_files
from ui.progress_display import RichProgressDisplay
from ui.prompts import make_action_selection
from ui.report import print_stats
from utils import err_console, normalize_extensions, split_comma_separated

app = typer.Typer(add_completion=False)


def version_callback(value: bool) -> None:
    if value:
        pr(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.command()
def main(
    license_path: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            help="Path to a file containing ONLY the license header.",
        ),
    ],
    path: Annotated[
        Path,
        typer.Argument(
            exists=True,  # Typer throws error if path doesn't exist
            file_okay=False,  # Typer throws error if it's a file, not a dir
            dir_okay=True,
            help="Root folder of the source files to check.",
        ),
    ],
    extensions: Annotated[
        list[str],
        typer.Argument(
            help="Extensions of the files to check, with or without the dot (e.g. js ts).",
        ),
    ],
    add: Annotated[
        bool,
        typer.Option(
            "--add", "-a", help="Add the target license in case the file does not have any."
        ),
    ] = False,
    replace: Annotated[
        bool,
        typer.Option(
            "--replace",
            "-r",
            help="Replace the existing license by the target one in case they are different.",
        ),
    ] = False,
    ignore: Annotated[
        str | None,
        typer.Option(
            "--ignore",
            "-i",
            help="A comma separated list of the folders, files and/or paths that should be "
            "ignored. Does not support wildcards.",
        ),
    ] = None,
    header_regex: Annotated[
        str | None,
        typer.Option(
            "--header-regex",
            "-e",
            help="A regular expression to match a header comment. A named group "
            "'header' limits the header to that group.",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers", "-j", min=1, help="Maximum number of files processed concurrently."
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Be verbose during execution printing options, files being processed, "
            "execution time, ...",
        ),
    ] = False,
    interactive: Annotated[
        bool,
        typer.Option(
            "--interactive",
            "-I",
            help="Ask which changes to apply when neither -a nor -r is given.",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Display version number.",
        ),
    ] = False,
):
    """
    Check that source files start with the target license header, and
    optionally add or replace it.

    Raises:
        typer.Exit: With code 1 if the license header cannot be read or some
            files could not be processed.
    """
    normalized_extensions = normalize_extensions(extensions)
    if not normalized_extensions:
        raise typer.BadParameter(
            "at least one extension is required", param_hint="'EXTENSIONS...'"
        )

    compiled_regex = compile_header_regex(header_regex)

    if interactive and not (add or replace):
        add, replace = make_action_selection()

    options = Options(
        add=add,
        replace=replace,
        path=path,
        license_path=license_path,
        extensions=normalized_extensions,
        ignore_paths=split_comma_separated(ignore),
        header_regex=compiled_regex,
        max_workers=workers,
    )

    try:
        stats = process_files(
            options,
            FilesystemIOHandler(),
            progress_display=RichProgressDisplay(console=err_console),
        )
    except LicenseReadError as e:
        print_license_err(e)
    except Exception as e:  # noqa: BLE001
        print_unexpected_err(e)

    print_stats(stats, options, verbose=verbose)

    if stats.has_errors:
        raise typer.Exit(code=1)


def compile_header_regex(pattern: str | None) -> re.Pattern[str]:
    """
    Compile a user supplied header pattern.

    The pattern is compiled with re.DOTALL, so "." also spans the lines of a
    multi-line comment.

    Args:
        pattern: The pattern given with --header-regex, or None.

    Returns:
        re.Pattern: The compiled pattern, or the default block comment pattern.

    Raises:
        typer.BadParameter: If the pattern is not a valid regular expression.
    """
    if not pattern:
        return DEFAULT_HEADER_REGEX
    try:
        return re.compile(pattern, re.DOTALL)
    except re.error as e:
        raise typer.BadParameter(
            f"invalid regular expression: {e}", param_hint="'--header-regex'"
        ) from e


def print_license_err(e: LicenseReadError) -> None:
    """
    Displays a user-friendly error message when the license header cannot be loaded.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    err_console.print("❌ [bold red]License Header Error[/bold red]")
    err_console.print(f"{e.message}")
    if e.original_exception:
        err_console.print(f"\nTechnical details: {e.original_exception}")
    err_console.print(
        "\n[yellow]Quick Fix:[/yellow] Point the first argument to a readable file "
        "containing ONLY the license header."
    )
    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    err_console.print("❌ [bold red]Unexpected Error[/bold red]")
    err_console.print("An unexpected error occurred while processing your files.")
    err_console.print(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    err_console.print(f"[yellow]Error Message:[/yellow] {e}")

    err_console.print("\n--- PLEASE REPORT THIS ---")
    if e.__cause__:
        err_console.print(f"Caused by: {e.__cause__}")

    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
