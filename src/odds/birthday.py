# Birthday problem: https://en.wikipedia.org/wiki/Birthday_problem

from typing import Iterable, List, Set

from .errors import ConfigurationError
from .random_source import RandomSource


DAYS_IN_YEAR = 365


def _check_group(group_size: int, days_in_year: int) -> None:
    if group_size <= 0:
        raise ConfigurationError("group_size must be > 0")
    if days_in_year <= 0:
        raise ConfigurationError("days_in_year must be > 0")


def has_collision(
    source: RandomSource,
    group_size: int,
    days_in_year: int = DAYS_IN_YEAR,
) -> bool:
    """
    Return True if at least two people in a random group share a birthday.

    Stops drawing as soon as a repeated day shows up.
    """
    _check_group(group_size, days_in_year)

    seen: Set[int] = set()
    for _ in range(group_size):
        day = source.next_uniform_int(days_in_year)
        if day in seen:
            return True
        seen.add(day)
    return False


def draw_birthdays(
    source: RandomSource,
    group_size: int,
    days_in_year: int = DAYS_IN_YEAR,
) -> List[int]:
    """
    Birthdays (day-of-year indices) of a random group, drawn all at once.
    """
    _check_group(group_size, days_in_year)
    return [source.next_uniform_int(days_in_year) for _ in range(group_size)]


def has_duplicates(values: Iterable[int]) -> bool:
    seen: Set[int] = set()
    for v in values:
        if v in seen:
            return True
        seen.add(v)
    return False
