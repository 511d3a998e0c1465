import random
import threading
from typing import Optional, Protocol

from .errors import ConfigurationError


class RandomSource(Protocol):
    """
    Anything that hands out uniform integers.

    next_uniform_int(bound) must return an integer in [0, bound), each call
    independent of the previous ones. Trial generators only ever talk to
    this method, so tests can pass in a scripted stub.
    """

    def next_uniform_int(self, bound: int) -> int:
        ...


class SeededRandomSource:
    """
    RandomSource backed by a private random.Random.

    seed=None lets random.Random seed itself from OS entropy (or the clock),
    so two processes started with no seed produce different draws.
    Instances never share state; one per worker is the normal setup.

    Not thread-safe. Wrap in LockedRandomSource to share across threads.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_uniform_int(self, bound: int) -> int:
        if bound <= 0:
            raise ConfigurationError("bound must be > 0")
        return self._rng.randrange(bound)


class LockedRandomSource:
    """
    Serializes every draw on a single underlying source.

    Each draw takes the lock, so workers sharing one of these pay a
    synchronization point per call.
    """

    def __init__(self, inner: RandomSource):
        self._inner = inner
        self._lock = threading.Lock()

    def next_uniform_int(self, bound: int) -> int:
        with self._lock:
            return self._inner.next_uniform_int(bound)


def worker_seed(seed: Optional[int], index: int) -> Optional[int]:
    """
    Seed for worker `index` derived from a base seed.

    Offsets are spread out so neighbouring workers do not get neighbouring
    seeds. None stays None (every worker self-seeds).
    """
    if seed is None:
        return None
    return seed + 1000 * (index + 1)
