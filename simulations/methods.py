# simulations/methods.py

from __future__ import annotations

from typing import Callable, Dict

from .common import ExperimentResult, TrialSpec, Timer, FrequencyTable, fractions, precision_estimate, to_fraction
from .runner import TrialFn, run_trials, run_trials_parallel, tally

from src.odds.birthday import DAYS_IN_YEAR, draw_birthdays, has_collision, has_duplicates
from src.odds.diagnostic_test import examine_patient
from src.odds.dice import MAX_SUM, MIN_SUM, roll_sum
from src.odds.errors import ConfigurationError
from src.odds.monty_hall import play_game
from src.odds.random_source import SeededRandomSource, worker_seed


SimFn = Callable[..., ExperimentResult]


def _run(spec: TrialSpec, trial_fn: TrialFn) -> FrequencyTable:
    """
    Dispatch to the sequential or threaded runner.

    Each worker gets its own SeededRandomSource derived from spec.seed.
    """
    if spec.workers == 1:
        return run_trials(trial_fn, spec.num_trials, SeededRandomSource(spec.seed))

    return run_trials_parallel(
        trial_fn,
        spec.num_trials,
        lambda i: SeededRandomSource(worker_seed(spec.seed, i)),
        spec.workers,
    )


def simulate_birthday(
    spec: TrialSpec,
    group_size: int = 23,
    days_in_year: int = DAYS_IN_YEAR,
    short_circuit: bool = True,
) -> ExperimentResult:
    """
    Fraction of random groups of `group_size` people where at least two
    share a birthday. Around 0.507 for 23 people and 365 days.

    short_circuit=False draws the whole group before looking for a repeat;
    the estimate is the same, only slower.
    """
    if group_size <= 0:
        raise ConfigurationError("group_size must be > 0")
    if days_in_year <= 0:
        raise ConfigurationError("days_in_year must be > 0")

    if short_circuit:
        trial_fn = lambda src: has_collision(src, group_size, days_in_year)
    else:
        trial_fn = lambda src: has_duplicates(draw_birthdays(src, group_size, days_in_year))

    with Timer() as t:
        table = _run(spec, trial_fn)

    return ExperimentResult(
        problem="birthday",
        spec=spec,
        table=table,
        estimates={"collision": to_fraction(table.get(True, 0), spec.num_trials)},
        runtime_s=t.elapsed_s,
        meta={
            "group_size": group_size,
            "days_in_year": days_in_year,
            "short_circuit": short_circuit,
        },
    )


def simulate_dice(spec: TrialSpec) -> ExperimentResult:
    """
    Distribution of the sum of two dice.

    Every sum in [2, 12] gets an estimate, 0.0 for sums never rolled.
    """
    with Timer() as t:
        table = _run(spec, roll_sum)

    observed = fractions(table, spec.num_trials)
    estimates = {
        str(total): observed.get(total, 0.0)
        for total in range(MIN_SUM, MAX_SUM + 1)
    }

    return ExperimentResult(
        problem="dice",
        spec=spec,
        table=table,
        estimates=estimates,
        runtime_s=t.elapsed_s,
        meta={},
    )


def simulate_monty_hall(spec: TrialSpec) -> ExperimentResult:
    """
    Win rate of the "stay" and "switch" strategies (1/3 and 2/3).
    """
    with Timer() as t:
        table = _run(spec, play_game)

    stay_wins = tally(table, lambda o: o.stay_wins)
    switch_wins = tally(table, lambda o: o.switch_wins)

    return ExperimentResult(
        problem="monty_hall",
        spec=spec,
        table=table,
        estimates={
            "stay": to_fraction(stay_wins, spec.num_trials),
            "switch": to_fraction(switch_wins, spec.num_trials),
        },
        runtime_s=t.elapsed_s,
        meta={"stay_wins": stay_wins, "switch_wins": switch_wins},
    )


def simulate_diagnostic_test(spec: TrialSpec) -> ExperimentResult:
    """
    Fraction of people diagnosed as sick who actually are.

    Raises UndefinedEstimate if nobody in the sample was diagnosed.
    """
    with Timer() as t:
        table = _run(spec, examine_patient)

    num_sick = tally(table, lambda d: d.sick)
    num_diagnosed = tally(table, lambda d: d.diagnosed)

    return ExperimentResult(
        problem="diagnostic_test",
        spec=spec,
        table=table,
        estimates={"precision": precision_estimate(num_sick, num_diagnosed)},
        runtime_s=t.elapsed_s,
        meta={"num_sick": num_sick, "num_diagnosed": num_diagnosed},
    )


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> SimFn:
    name = name.strip().lower()
    if name not in METHODS:
        raise ConfigurationError(f"unknown problem '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


# METHODS maps problem name -> function.
# Note: simulate_birthday takes extra group_size/days_in_year parameters; callers can pass them.
METHODS: Dict[str, SimFn] = {
    "birthday": simulate_birthday,
    "dice": simulate_dice,
    "monty_hall": simulate_monty_hall,
    "diagnostic_test": simulate_diagnostic_test,
}
