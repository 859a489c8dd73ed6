# -*- coding: utf-8 -*-
"""Injectable sources of uniform random integers."""
import random
from abc import ABC, abstractmethod
from typing import Iterable, Optional

import numpy as np

from sudoku_csp.utils.registry import Registry

RANDOM_PROVIDERS = Registry("random_providers")
# providers that can be built from a seed alone; `sequence` needs explicit draws
SEEDED_PROVIDERS = ("python", "numpy")


class RandomProvider(ABC):
    """Uniform random integers over small ranges."""

    @abstractmethod
    def randrange(self, n: int) -> int:
        """Return an integer drawn uniformly from `[0, n)`."""


@RANDOM_PROVIDERS.register_module("python")
class PythonRandomProvider(RandomProvider):
    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def randrange(self, n: int) -> int:
        return self._random.randrange(n)


@RANDOM_PROVIDERS.register_module("numpy")
class NumpyRandomProvider(RandomProvider):
    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def randrange(self, n: int) -> int:
        return int(self._rng.integers(0, n))


@RANDOM_PROVIDERS.register_module("sequence")
class SequenceRandomProvider(RandomProvider):
    """Replays a fixed sequence of draws, for reproducible scenarios in tests.

    Every value must lie in the range requested by the draw that consumes it.
    """

    def __init__(self, values: Iterable[int] = (), seed: Optional[int] = None):
        self._values = list(values)
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    def randrange(self, n: int) -> int:
        if self._index >= len(self._values):
            raise ValueError(f"Random sequence exhausted after {len(self._values)} draws.")
        value = self._values[self._index]
        if not 0 <= value < n:
            raise ValueError(f"Draw #{self._index} is {value}, expected a value in [0, {n}).")
        self._index += 1
        return value


def get_random_provider(name: str = "python", seed: Optional[int] = None, **kwargs) -> RandomProvider:
    """Build a registered random provider by name."""
    provider_cls = RANDOM_PROVIDERS.get(name)
    if provider_cls is None:
        raise ValueError(
            f"Unknown random provider: {name}, available: {list(RANDOM_PROVIDERS.modules)}"
        )
    return provider_cls(seed=seed, **kwargs)
