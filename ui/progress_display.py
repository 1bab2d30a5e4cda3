"""
Progress reporting protocol for decoupling the UI from the processing pipeline.

The aggregator reports every classified file through this protocol, so the
pipeline can run under a Rich progress bar from the command line and silently
in tests.
"""

from types import TracebackType
from typing import Protocol

from rich.console import Console
from rich.progress import Progress, TaskID

from ui.progress import ProgressState, create_progress, create_task, finish_task


class ProgressDisplay(Protocol):
    """
    Protocol for progress reporting.

    The lifecycle is:
    1. Context manager entry (__enter__)
    2. on_start() - Called once, before the walk starts
    3. on_update() - Called once per collected Operation, from the aggregator thread
    4. on_complete() - Called once all Operations have been collected
    5. Context manager exit (__exit__)
    """

    def __enter__(self) -> "ProgressDisplay":
        """Enter the progress context."""

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the progress context."""

    def on_start(self, description: str) -> None:
        """Begin reporting with an initial description."""

    def on_update(self, *, advance: int = 1) -> None:
        """Advance the count of processed items."""

    def on_complete(self, description: str, completed: int, failed: bool = False) -> None:
        """
        Mark the work as finished.

        Args:
            description: Final description text to display.
            completed: Number of items that were processed.
            failed: True if some items ended in error; changes the final color.
        """


class RichProgressDisplay:
    """
    Rich implementation of ProgressDisplay.

    Must be used as a context manager: `with RichProgressDisplay() as rpd:`.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = create_progress(self._console)
        self._progress.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._progress:
            self._progress.__exit__(exc_type, exc_val, exc_tb)

    def on_start(self, description: str) -> None:
        """
        Create the task shown in the progress bar.

        Raises:
            RuntimeError: If not used as a context manager.
        """
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as rpd:"
            )
        self._task = create_task(self._progress, description)

    def on_update(self, *, advance: int = 1) -> None:
        """
        Advance the task counter.

        Raises:
            RuntimeError: If on_start() was not called first.
        """
        if not self._progress or self._task is None:
            raise RuntimeError("on_start() must be called before on_update()")
        self._progress.update(self._task, advance=advance)

    def on_complete(self, description: str, completed: int, failed: bool = False) -> None:
        """
        Show the final count, in red if some files failed and green otherwise.

        Raises:
            RuntimeError: If on_start() was not called first.
        """
        if not self._progress or self._task is None:
            raise RuntimeError("on_start() must be called before on_complete()")
        state = ProgressState.ERROR if failed else ProgressState.COMPLETE
        finish_task(self._progress, self._task, state, description, completed)


class NoOpProgressDisplay:
    """
    No-op implementation of ProgressDisplay for testing and quiet runs.
    """

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        """Exit the progress context (no-op)."""

    def on_start(self, description: str) -> None:
        """No-op: does nothing."""

    def on_update(self, *, advance: int = 1) -> None:
        """No-op: does nothing."""

    def on_complete(self, description: str, completed: int, failed: bool = False) -> None:
        """No-op: does nothing."""
