from .errors import ConfigurationError
from .random_source import RandomSource


SIDES = 6
MIN_SUM = 2
MAX_SUM = 2 * SIDES


def roll_die(source: RandomSource, sides: int = SIDES) -> int:
    """Face value of one fair die, in [1, sides]."""
    if sides <= 0:
        raise ConfigurationError("sides must be > 0")
    # draws are 0-based
    return source.next_uniform_int(sides) + 1


def roll_sum(source: RandomSource) -> int:
    """Sum of two independent six-sided dice, in [2, 12]."""
    return roll_die(source) + roll_die(source)
