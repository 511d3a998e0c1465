# simulations/run.py

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .common import ExperimentResult, TrialSpec
from .methods import get_method

from src.odds.errors import ConfigurationError


logger = logging.getLogger(__name__)

# Keeps repeat seeds clear of the per-worker offsets derived from them.
REPEAT_SEED_STRIDE = 1_000_000


def run_experiment(
    problem: str,
    num_trials: int,
    workers: int = 1,
    seed: Optional[int] = None,
    method_kwargs: Optional[Dict[str, Any]] = None,
) -> ExperimentResult:
    """
    Run a single simulation and return an ExperimentResult.

    Parameters
    ----------
    problem:
        Name of the problem ('birthday', 'dice', 'monty_hall', 'diagnostic_test').
    num_trials:
        Number of independent trials.
    workers:
        Number of worker threads; 1 runs everything in the calling thread.
    seed:
        Base RNG seed. None seeds from the environment, so runs differ.
    method_kwargs:
        Optional dict of problem-specific kwargs (e.g., {'group_size': 30}).

    Returns
    -------
    ExperimentResult
    """
    fn = get_method(problem)
    spec = TrialSpec(num_trials=num_trials, workers=workers, seed=seed)

    kwargs = method_kwargs or {}
    result = fn(spec, **kwargs)
    logger.info(
        "%s: %d trials on %d worker(s) in %.3fs",
        result.problem, num_trials, workers, result.runtime_s or 0.0,
    )
    return result


def run_repeated(
    problem: str,
    repeats: int,
    num_trials: int,
    workers: int = 1,
    seed: Optional[int] = None,
    method_kwargs: Optional[Dict[str, Any]] = None,
) -> List[ExperimentResult]:
    """
    Convenience helper: run the same experiment `repeats` times.

    With a base seed each repeat gets its own derived seed, so the repeats
    are independent but the whole batch is reproducible.
    """
    if repeats <= 0:
        raise ConfigurationError("repeats must be > 0")

    return [
        run_experiment(
            problem=problem,
            num_trials=num_trials,
            workers=workers,
            seed=None if seed is None else seed + REPEAT_SEED_STRIDE * i,
            method_kwargs=method_kwargs,
        )
        for i in range(repeats)
    ]
