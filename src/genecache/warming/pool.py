"""Concurrent cache warming with a bounded worker pool.

Genes are independent of each other, so several walks can run at once. The
references abort becomes a shared cancel signal: once any worker sees a
failed references fetch, no new genes are taken from the input and the
walks still in flight stop before their next fetch.
"""

import logging
import threading
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Iterable, Iterator

from genecache.outcomes import TerminalOutcome, TerminalStatus, WarmingReport
from genecache.resources.models import GeneRecord
from genecache.warming.engine import FetchTraversalEngine

logger = logging.getLogger(__name__)


class ConcurrentWarmer:
    """Runs gene walks on a thread pool.

    At most ``workers`` genes are in flight, and records are pulled from the
    input only when a worker frees up.

    Args:
        engine: Engine shared by all workers
        workers: Number of concurrent gene walks
    """

    def __init__(self, engine: FetchTraversalEngine, workers: int = 4):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.engine = engine
        self.workers = workers
        self.cancel = threading.Event()

    def run(self, records: Iterable[GeneRecord]) -> WarmingReport:
        """
        Warm all genes, stopping early when a references fetch fails.

        Args:
            records: Gene records, consumed lazily

        Returns:
            WarmingReport; ``aborted`` holds the first gene that failed
        """
        # Each run gets its own cancel signal
        self.cancel = threading.Event()

        if self.workers == 1:
            return self.engine.run(records)

        report = WarmingReport()
        pending: Iterator[GeneRecord] = iter(records)
        active: dict[Future[TerminalOutcome], str] = {}

        logger.info(f"Starting concurrent warming with {self.workers} workers")

        def submit_next(executor: ThreadPoolExecutor) -> None:
            while len(active) < self.workers and not self.cancel.is_set():
                record = next(pending, None)
                if record is None:
                    return
                future = executor.submit(self._walk, record)
                active[future] = record.gene_id

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            try:
                submit_next(executor)
                while active:
                    done, _ = wait(active.keys(), return_when=FIRST_COMPLETED)
                    for future in done:
                        active.pop(future)
                        report.add(future.result())
                    submit_next(executor)
            except BaseException:
                # Stop the other walks before the pool joins them
                self.cancel.set()
                raise

        return report

    def _walk(self, record: GeneRecord) -> TerminalOutcome:
        outcome = self.engine.process_gene(record, cancel=self.cancel)
        if outcome.status is TerminalStatus.ABORTED:
            self.cancel.set()
        return outcome
