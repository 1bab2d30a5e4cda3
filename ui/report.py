"""
Result reporting for the command line.

Prints the Stats of a run with Rich: a one line summary by default, or the
processed files, the options and the totals when running verbose. Warnings
about skipped files and errors always go to stderr, errors in bold red.
"""

from rich.console import Console
from rich.markup import escape

from core.models import Action, Options
from core.stats import Stats
from utils import console as default_console, err_console as default_err_console

# Color used for each bucket, both in the file listing and in the totals.
ACTION_STYLES: dict[Action, str] = {
    Action.LICENSE_OK: "green",
    Action.LICENSE_REPLACED: "yellow",
    Action.LICENSE_ADDED: "red",
    Action.SKIPPED_ADD: "red",
    Action.SKIPPED_REPLACE: "red",
    Action.OPERATION_ERROR: "bold red",
}

# Order in which buckets are listed.
REPORT_ORDER: tuple[Action, ...] = (
    Action.LICENSE_OK,
    Action.LICENSE_REPLACED,
    Action.LICENSE_ADDED,
    Action.SKIPPED_ADD,
    Action.SKIPPED_REPLACE,
    Action.OPERATION_ERROR,
)

INFO_STYLE = "blue"


def print_stats(
    stats: Stats,
    options: Options,
    verbose: bool = False,
    console: Console | None = None,
    err_console: Console | None = None,
) -> None:
    """
    Print the outcome of a run.

    Args:
        stats: Aggregated results.
        options: Options the run was executed with; listed in verbose mode.
        verbose: Print every processed file, the options and the totals instead
            of the one line summary.
        console: Console for the report. Defaults to the shared stdout console.
        err_console: Console for warnings. Defaults to the shared stderr console.
    """
    out = console if console is not None else default_console
    err = err_console if err_console is not None else default_err_console

    if verbose:
        print_processed_files(stats, out)
        print_options(options, out)
        print_totals(stats, out)
    else:
        out.print(
            f"[green]{stats.count(Action.LICENSE_OK)}[/green] licenses ok, "
            f"[yellow]{stats.count(Action.LICENSE_REPLACED)}[/yellow] licenses replaced, "
            f"[red]{stats.count(Action.LICENSE_ADDED)}[/red] licenses added"
        )

    print_warnings(stats, err)


def print_processed_files(stats: Stats, console: Console) -> None:
    console.print("files:")
    for action in REPORT_ORDER:
        paths = stats.files[action]
        if not paths:
            continue
        style = ACTION_STYLES[action]
        console.print(f"  {action.value}:")
        for path in sorted(paths):
            console.print(f"    - [{style}]{escape(str(path))}[/{style}]", soft_wrap=True)


def print_options(options: Options, console: Console) -> None:
    console.print("options:")
    console.print(
        f"  project_path: [{INFO_STYLE}]{escape(str(options.path))}[/{INFO_STYLE}]",
        soft_wrap=True,
    )
    if options.ignore_paths:
        console.print("  ignore_paths:")
        for ignore_path in options.ignore_paths:
            console.print(f"    - [{INFO_STYLE}]{escape(ignore_path)}[/{INFO_STYLE}]")
    console.print("  extensions:")
    for ext in options.extensions:
        console.print(f"    - [{INFO_STYLE}]{escape(ext)}[/{INFO_STYLE}]")
    console.print("  flags:")
    if options.add:
        console.print(f"    - [{INFO_STYLE}]add[/{INFO_STYLE}]")
    if options.replace:
        console.print(f"    - [{INFO_STYLE}]replace[/{INFO_STYLE}]")
    console.print(
        f"  license_header: [{INFO_STYLE}]{escape(str(options.license_path))}[/{INFO_STYLE}]",
        soft_wrap=True,
    )


def print_totals(stats: Stats, console: Console) -> None:
    console.print("totals:")
    for action in REPORT_ORDER:
        count = stats.count(action)
        if count > 0:
            style = ACTION_STYLES[action]
            console.print(f"  {action.value}: [{style}]{count} files[/{style}]")
    console.print(f"  elapsed_time: [{INFO_STYLE}]{stats.elapsed_ms}ms[/{INFO_STYLE}]")


def print_warnings(stats: Stats, console: Console) -> None:
    """
    Warn about files left untouched for lack of a flag, and about errors.
    """
    skipped_adds = stats.count(Action.SKIPPED_ADD)
    skipped_replaces = stats.count(Action.SKIPPED_REPLACE)
    errors = stats.count(Action.OPERATION_ERROR)

    if skipped_adds > 0:
        console.print(
            f"[yellow][!] {skipped_adds} files had no license but were not changed "
            "as the -a (add) option was not supplied.[/yellow]"
        )
    if skipped_replaces > 0:
        console.print(
            f"[yellow][!] {skipped_replaces} files had a different license but were not "
            "changed as the -r (replace) option was not supplied.[/yellow]"
        )
    if errors > 0:
        console.print(
            f"[bold red][!] {errors} files could not be processed. "
            "Run with -v to list them.[/bold red]"
        )
    for path, error in sorted(stats.failures.items()):
        console.print(
            f"[red]    - {escape(str(path))}: {type(error).__name__}: "
            f"{escape(str(error))}[/red]",
            soft_wrap=True,
        )
