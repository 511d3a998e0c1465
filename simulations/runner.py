# simulations/runner.py

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Callable, Hashable, Iterable, List, TypeVar

from src.odds.errors import ConfigurationError
from src.odds.random_source import LockedRandomSource, RandomSource

from .common import FrequencyTable


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

TrialFn = Callable[[RandomSource], T]
SourceFactory = Callable[[int], RandomSource]


def _check_positive(name: str, value: int) -> None:
    if value <= 0:
        raise ConfigurationError(f"{name} must be > 0")


def run_trials(trial_fn: TrialFn, num_trials: int, source: RandomSource) -> FrequencyTable:
    """
    Run `trial_fn` exactly `num_trials` times against one source and count
    how often each outcome showed up.

    Only observed outcomes appear as keys.
    """
    _check_positive("num_trials", num_trials)

    table: FrequencyTable = {}
    for _ in range(num_trials):
        outcome = trial_fn(source)
        table[outcome] = table.get(outcome, 0) + 1
    return table


def partition_trials(num_trials: int, workers: int) -> List[int]:
    """
    Split `num_trials` into contiguous per-worker chunks.

    The last chunk takes the remainder. Chunks of size zero (more workers
    than trials) are dropped.
    """
    _check_positive("num_trials", num_trials)
    _check_positive("workers", workers)

    per_worker = num_trials // workers
    remainder = num_trials % workers

    chunks = []
    for i in range(workers):
        n = per_worker
        if i == workers - 1:
            n += remainder
        if n > 0:
            chunks.append(n)
    return chunks


def merge_tables(tables: Iterable[FrequencyTable]) -> FrequencyTable:
    merged: FrequencyTable = {}
    for t in tables:
        for outcome, count in t.items():
            merged[outcome] = merged.get(outcome, 0) + count
    return merged


def run_trials_parallel(
    trial_fn: TrialFn,
    num_trials: int,
    source_factory: SourceFactory,
    workers: int,
) -> FrequencyTable:
    """
    Same as run_trials, with trials spread over a thread pool.

    Worker i draws from source_factory(i) and counts into a private
    table; the partial tables are merged here after every worker is done,
    so no count is ever shared between threads.
    """
    chunks = partition_trials(num_trials, workers)
    logger.debug(
        "running %d trials on %d workers (chunks=%s)",
        num_trials, len(chunks), chunks,
    )

    with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
        futures = [
            executor.submit(run_trials, trial_fn, n, source_factory(i))
            for i, n in enumerate(chunks)
        ]
        partials = [f.result() for f in futures]

    return merge_tables(partials)


def shared_source_factory(source: RandomSource) -> SourceFactory:
    """
    Factory that gives every worker the same lock-protected source.
    """
    locked = LockedRandomSource(source)
    return lambda _index: locked


def tally(table: FrequencyTable, predicate: Callable[[T], bool]) -> int:
    """
    Number of trials whose outcome satisfies `predicate`.

    Used to read the per-field counters (stay wins, sick, ...) off a table
    keyed by outcome records.
    """
    total = 0
    for outcome, count in table.items():
        if predicate(outcome):
            total += count
    return total
