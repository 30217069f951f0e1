"""Multi-start k-means: many seeded runs on a thread pool, best score wins."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, wait

import numpy as np

from .config import check_thread_count
from .errors import InternalError
from .kmeans import ClusterResult, run_kmeans

logger = logging.getLogger(__name__)


class BestResult:
    """Lowest-score result seen so far, shared by all workers."""

    def __init__(self, k: int = 0):
        self._lock = threading.Lock()
        self._result = ClusterResult.empty(k)
        self._filled = False

    def offer(self, candidate: ClusterResult) -> bool:
        """Keep ``candidate`` if it beats the current best. Ties keep the incumbent."""
        with self._lock:
            if candidate.score < self._result.score or not self._filled:
                self._result = candidate
                self._filled = True
                return True
            return False

    @property
    def score(self) -> float:
        with self._lock:
            return self._result.score

    def take(self) -> ClusterResult:
        with self._lock:
            if not self._filled:
                raise InternalError("no clustering run reported a result")
            return self._result


def make_pool(max_threads: int) -> ThreadPoolExecutor:
    """Build the worker pool, failing before any work is queued."""
    check_thread_count(max_threads)
    return ThreadPoolExecutor(max_workers=max_threads, thread_name_prefix="kmeans")


def optimize(
    points: np.ndarray,
    k: int,
    max_iters: int,
    converge: float,
    base_seed: int,
    runs: int,
    concurrency: int = 1,
    pool: ThreadPoolExecutor | None = None,
) -> ClusterResult:
    """Run k-means with seeds ``base_seed`` through ``base_seed + runs`` and keep the best.

    That is ``runs + 1`` runs in total. At most ``concurrency`` run at once;
    an existing ``pool`` may be passed instead, its size is then the bound.
    """
    points = np.asarray(points, dtype=np.float64)
    best = BestResult(k)

    def attempt(seed: int) -> None:
        result = run_kmeans(points, k, max_iters, converge, seed)
        logger.debug(
            f"seed {seed}: score {result.score:.2f} after {result.iterations} iterations"
        )
        best.offer(result)

    own_pool = pool is None
    if own_pool:
        pool = make_pool(concurrency)
    try:
        futures = {pool.submit(attempt, base_seed + i): base_seed + i for i in range(runs + 1)}
        wait(futures)
    finally:
        if own_pool:
            pool.shutdown(wait=True)

    for future, seed in futures.items():
        exc = future.exception()
        if exc is not None:
            raise InternalError(f"clustering run with seed {seed} failed: {exc!r}") from exc

    return best.take()
