"""
Concurrent walk-and-aggregate engine.

Walks the source tree on the calling thread, reads every eligible file and
hands it to a bounded pool of worker threads that classify it. Each worker puts
exactly one Operation on a bounded result queue; a single aggregator thread
drains that queue into the Stats of the run.

The walker counts every Operation it causes (one per eligible file, read error
or traversal error) and the run only returns once the aggregator has received
exactly that many, so no file is lost or counted twice.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from queue import Queue
from threading import BoundedSemaphore
import time

from constants import DEFAULT_MAX_WORKERS, RESULT_QUEUE_SIZE
from core.exceptions import FileReadError, LicenseReadError
from core.file_io import IOHandler
from core.models import Action, Operation, Options, WalkEntry
from core.path_filter import is_extension_eligible, should_ignore
from core.processing import process_file
from core.stats import ResultQueue, Stats, StatsAggregator, TraversalComplete
from ui.progress_display import ProgressDisplay, RichProgressDisplay


def process_files(
    options: Options,
    io_handler: IOHandler,
    progress_display: ProgressDisplay | None = None,
) -> Stats:
    """
    Check (and fix, if requested) the license header of every eligible file
    under `options.path`.

    The canonical license is read once, before anything else. If it cannot be
    read the run is aborted: no file is visited and no Stats are produced.

    Per-file problems never abort the run. A file that cannot be read, a path
    the traversal reports as failing, and a file whose new content cannot be
    written all end up in the OPERATION_ERROR bucket. If classifying a file
    raises unexpectedly, the file is also put in that bucket and the exception
    is kept in `Stats.failures`.

    Args:
        options: Run options.
        io_handler: Handler used to read the license, walk the tree, read files
            and persist changes.
        progress_display: Optional progress display. If None, defaults to
            `RichProgressDisplay`. For testing, pass `NoOpProgressDisplay()`.

    Returns:
        Stats with one entry per eligible or failing path.

    Raises:
        LicenseReadError: If the license file cannot be read or is empty.
    """
    license_text = load_license(options.license_path, io_handler)

    display = progress_display if progress_display is not None else RichProgressDisplay()
    max_workers = options.max_workers or DEFAULT_MAX_WORKERS

    results: ResultQueue = Queue(maxsize=RESULT_QUEUE_SIZE)
    # Bounds the files read but not yet classified, so the walk waits for the
    # workers instead of holding every file of a large tree in memory.
    slots = BoundedSemaphore(max_workers)
    aggregator = StatsAggregator(results, display)
    tasks: list[tuple[Path, Future]] = []

    started_at = time.perf_counter()

    with display as rpd:
        rpd.on_start(f"Checking license headers in {options.path}...")

        with (
            ThreadPoolExecutor(max_workers=1, thread_name_prefix="collector") as collector,
            ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="worker") as workers,
        ):
            collected = collector.submit(aggregator.collect, started_at)

            expected = 0
            try:
                for entry in io_handler.walk(options.path):
                    expected += _dispatch_entry(
                        entry, license_text, options, io_handler, results, slots, workers, tasks
                    )
            finally:
                # The aggregator must get the count even if the walk raised.
                results.put(TraversalComplete(expected))

            stats = collected.result()

        # Paths whose classification raised are already in the error bucket.
        for path, task in tasks:
            error = task.exception()
            if isinstance(error, Exception):
                stats.record_failure(path, error)
            elif error is not None:
                raise error

        rpd.on_complete(
            f"Checked {stats.total} files", stats.total, failed=stats.has_errors
        )

    return stats


def load_license(license_path: Path, io_handler: IOHandler) -> str:
    """
    Read the canonical license header.

    Raises:
        LicenseReadError: If the file cannot be read, or holds only whitespace
            (an empty license would match every file).
    """
    try:
        license_text = io_handler.read_file(license_path)
    except FileReadError as e:
        raise LicenseReadError(
            message=f"Failed to read license header file: {license_path}",
            file_path=str(license_path),
            original_exception=e,
        ) from e

    if not license_text.strip():
        raise LicenseReadError(
            message=f"License header file is empty: {license_path}",
            file_path=str(license_path),
        )
    return license_text


def _dispatch_entry(
    entry: WalkEntry,
    license_text: str,
    options: Options,
    io_handler: IOHandler,
    results: ResultQueue,
    slots: BoundedSemaphore,
    workers: ThreadPoolExecutor,
    tasks: list[tuple[Path, Future]],
) -> int:
    """
    Decide what to do with one walked entry.

    Returns:
        The number of Operations this entry will produce: 0 if skipped, 1 otherwise.
    """
    path = entry.path

    if should_ignore(_relative_to_root(path, options.path), options.ignore_paths):
        return 0

    if entry.error is not None:
        results.put(Operation(Action.OPERATION_ERROR, path))
        return 1

    if entry.is_dir or not is_extension_eligible(path, options.extensions):
        return 0

    try:
        content = io_handler.read_file(path)
    except FileReadError:
        results.put(Operation(Action.OPERATION_ERROR, path))
        return 1

    slots.acquire()
    task = workers.submit(
        _classify, path, content, license_text, options, io_handler, results, slots
    )
    tasks.append((path, task))
    return 1


def _classify(
    path: Path,
    content: str,
    license_text: str,
    options: Options,
    io_handler: IOHandler,
    results: ResultQueue,
    slots: BoundedSemaphore,
) -> Action:
    action = Action.OPERATION_ERROR
    try:
        action = process_file(path, content, license_text, options, io_handler)
        return action
    finally:
        # Exactly one Operation per dispatched file, even if classification raised.
        results.put(Operation(action, path))
        slots.release()


def _relative_to_root(path: Path, root: Path) -> Path:
    # Ignore entries only apply to the part of the path below the scanned root.
    try:
        return path.relative_to(root)
    except ValueError:
        return path
