"""Drive adapters through the workload and time them."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

import psutil

from orm_bench.adapters.base import Adapter
from orm_bench.errors import HarnessError, OperationFailure, SetupFailure
from orm_bench.workload import Workload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one adapter run.

    ``duration`` is in seconds and is the only value used for ranking.
    ``rss_delta_mb`` is how much the process resident set size changed
    between just before setup and just after close.
    """

    name: str
    duration: float
    rss_delta_mb: float = 0.0


def sample_rss_mb() -> float:
    """Resident memory of this process in MB."""
    return psutil.Process().memory_info().rss / 1024 / 1024


def _call(adapter: Adapter, operation: str, func, *args, index: Optional[int] = None):
    try:
        return func(*args)
    except HarnessError as exc:
        if exc.index is None:
            exc.index = index
        raise
    except Exception as exc:
        error_cls = SetupFailure if operation == "setup" else OperationFailure
        raise error_cls(adapter.name, operation, f"{type(exc).__name__}: {exc}", index=index) from exc


def _close_after_failure(adapter: Adapter) -> None:
    # The error already propagating names the failed operation; keep it
    try:
        adapter.close()
    except Exception as exc:
        logger.warning("%s: close failed after an earlier error: %s: %s", adapter.name, type(exc).__name__, exc)


def run_benchmark(adapter: Adapter, workload: Workload) -> BenchmarkResult:
    """Run setup and the full create/read/update/delete cycle for every item.

    Items are processed strictly in order and each cycle works only on the id
    returned by its own create. The handle is closed right after the end
    timestamp, or before any error propagates. A failing close is reported as
    an ``OperationFailure`` unless an earlier error is already on its way out.
    """
    logger.debug("Starting %s with %d items", adapter.name, len(workload))
    rss_before = sample_rss_mb()
    try:
        start = time.perf_counter()
        _call(adapter, "setup", adapter.setup)

        for item in workload:
            record_id = _call(adapter, "create", adapter.create, item, index=item.index)
            _call(adapter, "read", adapter.read, record_id, index=item.index)
            _call(adapter, "update", adapter.update, record_id, item, index=item.index)
            _call(adapter, "delete", adapter.delete, record_id, index=item.index)

        end = time.perf_counter()
    except BaseException:
        _close_after_failure(adapter)
        raise
    _call(adapter, "close", adapter.close)

    result = BenchmarkResult(adapter.name, end - start, sample_rss_mb() - rss_before)
    logger.debug("Finished %s in %.6fs", adapter.name, result.duration)
    return result


def run_all(
    adapters: Iterable[Callable[[], Adapter]],
    workload: Workload,
    on_start: Optional[Callable[[Adapter], None]] = None,
    on_result: Optional[Callable[[BenchmarkResult], None]] = None,
) -> List[BenchmarkResult]:
    """Run each adapter in order on a fresh instance and collect the results.

    ``adapters`` holds adapter classes (or any zero-argument factory). The
    first failure propagates unchanged and no later adapter is started.
    """
    results = []
    for factory in adapters:
        adapter = factory()
        if on_start:
            on_start(adapter)
        result = run_benchmark(adapter, workload)
        if on_result:
            on_result(result)
        results.append(result)
    return results
