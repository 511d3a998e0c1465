# simulations/__init__.py
"""
Monte Carlo estimators for classic probability puzzles.

Run one via:
    python -m simulations.estimate --problem monty_hall --trials 1000000 [--workers 4] [--seed 42]
"""
