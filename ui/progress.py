"""
Progress bar creation and styling using Rich.

The number of files to classify is only known once the walk is over, so the
bar is created without a total: it shows a spinner, the running count of
classified files and the elapsed time, and is given its final count when the
run completes.
"""

from enum import StrEnum
from typing import Optional

from rich.console import Console
from rich.progress import (
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressState(StrEnum):
    """
    Color applied to the task description for each phase of a run.

    Attributes:
        IN_PROGRESS: Magenta while files are being classified.
        COMPLETE: Green once every file has been collected.
        ERROR: Red when the run finished with per-file errors.
    """

    IN_PROGRESS = "magenta"
    COMPLETE = "green"
    ERROR = "red"


def create_progress(console: Optional[Console] = None) -> Progress:
    """
    Create a Rich Progress configured for an open-ended file count.

    Args:
        console: Console to render on. Defaults to Rich's global console.

    Returns:
        Progress: A configured, not yet started, Rich Progress instance.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def create_task(progress: Progress, description: str) -> TaskID:
    return progress.add_task(
        f"[{ProgressState.IN_PROGRESS}]{description}", total=None
    )


def finish_task(
    progress: Progress,
    task: TaskID,
    state: ProgressState,
    description: str,
    completed: int,
) -> None:
    """
    Mark a task as finished with its final count and a state-colored description.

    Setting `total` to `completed` turns the open-ended task into a full bar.
    """
    progress.update(
        task,
        total=completed,
        completed=completed,
        description=f"[{state}]{description}",
    )
