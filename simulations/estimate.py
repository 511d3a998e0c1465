# simulations/estimate.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

import matplotlib.pyplot as plt

from .common import ExperimentResult, format_result_line
from .methods import METHODS
from .run import run_repeated

from src.odds.errors import ConfigurationError, UndefinedEstimate


# Defaults mirror the classic write-ups of each problem.
DEFAULT_TRIALS = 1_000_000
DEFAULT_GROUP_SIZE = 23


def _method_kwargs(problem: str, args: argparse.Namespace):
    """
    Only the birthday problem takes extra kwargs (group size, draw mode).
    """
    if problem == "birthday":
        return {"group_size": args.group_size, "short_circuit": not args.draw_all}
    return {}


def plot_dice(result: ExperimentResult) -> None:
    """
    Bar chart of the dice-sum distribution.
    """
    sums = [int(k) for k in result.estimates]
    probs = list(result.estimates.values())

    plt.figure(figsize=(8, 4))
    plt.bar(sums, probs)
    plt.xticks(sums)
    plt.xlabel("Sum of two dice")
    plt.ylabel("Estimated probability")
    plt.title(f"Two dice ({result.spec.num_trials} rolls)")
    plt.tight_layout()
    plt.show()


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Estimate classic probabilities via Monte Carlo."
    )
    parser.add_argument("--problem", required=True, choices=sorted(METHODS.keys()))
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="number of trials")
    parser.add_argument("--workers", type=int, default=1, help="number of worker threads")
    parser.add_argument("--seed", type=int, default=None, help="base RNG seed (default: unseeded)")
    parser.add_argument("--repeat", type=int, default=1, help="run the experiment this many times")
    parser.add_argument("--group-size", type=int, default=DEFAULT_GROUP_SIZE, help="birthday group size")
    parser.add_argument("--draw-all", action="store_true", help="birthday: draw the whole group before checking for repeats")
    parser.add_argument("--plot", action="store_true", help="plot the dice distribution")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        results = run_repeated(
            problem=args.problem,
            repeats=args.repeat,
            num_trials=args.trials,
            workers=args.workers,
            seed=args.seed,
            method_kwargs=_method_kwargs(args.problem, args),
        )
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except UndefinedEstimate as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for r in results:
        print(format_result_line(r))

    if args.plot and args.problem == "dice":
        plot_dice(results[-1])

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
