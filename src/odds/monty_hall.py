# Monty Hall problem: https://en.wikipedia.org/wiki/Monty_Hall_problem

from dataclasses import dataclass

from .errors import ConfigurationError
from .random_source import RandomSource


NUM_DOORS = 3


@dataclass(frozen=True)
class MontyHallOutcome:
    """
    Which strategy would have won a single game.

    Exactly one of the two flags is set.
    """
    stay_wins: bool
    switch_wins: bool

    def __post_init__(self) -> None:
        if self.stay_wins == self.switch_wins:
            raise ValueError("exactly one of stay_wins/switch_wins must be True")


def play_game(source: RandomSource, num_doors: int = NUM_DOORS) -> MontyHallOutcome:
    """
    Play one game.

    The host opening a goat door and offering the switch does not change
    who wins: staying wins iff the first pick was the car, and switching
    wins otherwise. So only the two draws matter.
    """
    if num_doors <= 0:
        raise ConfigurationError("num_doors must be > 0")

    car_door = source.next_uniform_int(num_doors)
    player_door = source.next_uniform_int(num_doors)

    stay = car_door == player_door
    return MontyHallOutcome(stay_wins=stay, switch_wins=not stay)
