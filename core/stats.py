"""
Result aggregation.

Collects the Operations produced by a run into per-Action buckets. A single
consumer drains the result queue and is the only code that mutates the Stats,
so the many producer threads never need a lock around it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from queue import Queue
import time

from core.models import Action, Operation
from ui.progress_display import NoOpProgressDisplay, ProgressDisplay


@dataclass
class Stats:
    """
    Aggregate result of a run.

    Attributes:
        files: Mapping from every Action to the paths classified with it.
            Order within a bucket reflects arrival order, which is not meaningful.
        elapsed_ms: Milliseconds from the start of the run until the last
            expected Operation was collected.
        failures: Unexpected exceptions raised while classifying a file, by
            path. Each of these paths is also in the OPERATION_ERROR bucket.
    """

    files: dict[Action, list[Path]] = field(
        default_factory=lambda: {action: [] for action in Action}
    )
    elapsed_ms: int = 0
    failures: dict[Path, Exception] = field(default_factory=dict)

    def add_operation(self, operation: Operation) -> None:
        self.files[operation.action].append(operation.path)

    def record_failure(self, path: Path, error: Exception) -> None:
        self.failures[path] = error

    def count(self, action: Action) -> int:
        return len(self.files[action])

    @property
    def total(self) -> int:
        return sum(len(paths) for paths in self.files.values())

    @property
    def has_errors(self) -> bool:
        return bool(self.files[Action.OPERATION_ERROR])


@dataclass(frozen=True)
class TraversalComplete:
    """
    Marker put on the result queue once the walk is over.

    Carries the exact number of Operations the walker emitted, so the
    aggregator knows when it has received all of them.
    """

    expected: int


ResultQueue = Queue[Operation | TraversalComplete]


class StatsAggregator:
    """
    Single consumer of the result queue.

    Reads Operations until a TraversalComplete marker has been seen and as many
    Operations as it announced have been collected. Operations may arrive
    before or after the marker, in any order.
    """

    def __init__(
        self,
        results: ResultQueue,
        progress_display: ProgressDisplay | None = None,
    ) -> None:
        self._results = results
        self._progress = (
            progress_display if progress_display is not None else NoOpProgressDisplay()
        )
        self.stats = Stats()

    def collect(self, started_at: float) -> Stats:
        """
        Drain the queue until every expected Operation has been received.

        Args:
            started_at: `time.perf_counter()` value taken when the run started.

        Returns:
            The finalized Stats, with `elapsed_ms` stamped.
        """
        expected: int | None = None
        received = 0

        while expected is None or received < expected:
            item = self._results.get()
            if isinstance(item, TraversalComplete):
                expected = item.expected
                continue
            self.stats.add_operation(item)
            received += 1
            self._progress.on_update(advance=1)

        self.stats.elapsed_ms = int((time.perf_counter() - started_at) * 1000)
        return self.stats
