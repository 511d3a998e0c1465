# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional
import time

from src.odds.errors import ConfigurationError, UndefinedEstimate


FrequencyTable = Dict[Hashable, int]


@dataclass(frozen=True)
class TrialSpec:
    """
    Common run parameters shared across all simulations.
    """
    num_trials: int
    workers: int = 1  # >1 runs trials on a thread pool
    seed: Optional[int] = None  # None: every source seeds itself

    def __post_init__(self) -> None:
        if self.num_trials <= 0:
            raise ConfigurationError("num_trials must be > 0")
        if self.workers <= 0:
            raise ConfigurationError("workers must be > 0")


# --- Estimate reduction ------------------------------------------------------

def to_fraction(count: int, total: int) -> float:
    """
    count / total as a float.

    Raises UndefinedEstimate for total == 0 instead of returning NaN/inf.
    """
    if count < 0 or total < 0:
        raise ConfigurationError("count and total must be >= 0")
    if total == 0:
        raise UndefinedEstimate(f"undefined fraction: {count}/0")
    return count / total


def fractions(table: FrequencyTable, total: int) -> Dict[Hashable, float]:
    """
    Per-outcome fraction of `total` for every key in the table.
    """
    return {outcome: to_fraction(count, total) for outcome, count in table.items()}


def precision_estimate(num_sick: int, num_diagnosed: int) -> float:
    """
    Fraction of diagnosed people who are actually sick.
    """
    if num_diagnosed == 0:
        raise UndefinedEstimate("undefined precision: no diagnosed cases")
    return to_fraction(num_sick, num_diagnosed)


# --- Results -----------------------------------------------------------------

@dataclass
class ExperimentResult:
    """
    Common return type for all simulations.
    """
    problem: str
    spec: TrialSpec
    table: FrequencyTable
    estimates: Dict[str, float]

    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: one table entry per trial
        expected = self.spec.num_trials
        actual = 0
        for c in self.table.values():
            actual += c
        if actual != expected:
            raise ValueError(
                f"table sum mismatch: expected {expected}, got {actual}"
            )


class Timer:
    """
    Wall-clock duration of a block of trials, in seconds.

        with Timer() as t:
            table = run_trials(...)
        result.runtime_s = t.elapsed_s

    elapsed_s stays None until the block exits.
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_result_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing in the CLI.
    """
    parts = ", ".join(f"{name}={value:.4f}" for name, value in r.estimates.items())
    return (
        f"{r.problem}: trials={r.spec.num_trials}, {parts}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
