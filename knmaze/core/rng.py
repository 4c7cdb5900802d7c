import random
from typing import Iterable, Optional


class RandomExhausted(RuntimeError):
    pass


class SeededRandom:
    """
    Default random source. Generators only ever call uniform_int, so any
    object with that method can stand in (see ScriptedRandom).
    """
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform_int(self, max_exclusive: int) -> int:
        return self._rng.randrange(max_exclusive)


class ScriptedRandom:
    """Replays a fixed sequence of draws, in order."""
    def __init__(self, draws: Iterable[int]):
        self.draws = list(draws)
        self.consumed = 0

    @property
    def remaining(self) -> int:
        return len(self.draws) - self.consumed

    def uniform_int(self, max_exclusive: int) -> int:
        if self.consumed >= len(self.draws):
            raise RandomExhausted(f"Scripted sequence ran out after {self.consumed} draws")
        value = self.draws[self.consumed]
        if not 0 <= value < max_exclusive:
            raise ValueError(f"Scripted draw #{self.consumed} = {value} outside [0, {max_exclusive})")
        self.consumed += 1
        return value
