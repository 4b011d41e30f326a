'''
.------..------..------..------..------..------.
|s.--. ||e.--. ||q.--. ||g.--. ||e.--. ||n.--. |
| :/\: || (\/) || :/\: || :/\: || (\/) || :(): |
| :\/: || :\/: || (__) || :\/: || :\/: || ()() |
| '--'s|| '--'e|| '--'q|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from typing import Any, Dict, List, Optional
from seqcur import array, Cursor


class Generator:
    """seeded source of test sequences."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
            return method(**(kwargs or {}))
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")

    def ints(self, count: int, low: int = 0, high: int = 100) -> List[int]:
        """count integers in [low, high]"""
        return [self._resolve_faker_method('pyint', {'min_value': low, 'max_value': high})
                for _ in range(count)]

    def sorted_ints(self, count: int, low: int = 0, high: int = 10) -> List[int]:
        """sorted integers drawn from a narrow range, so duplicates are likely"""
        # convert numpy ints to native python ints
        return [int(x) for x in np.sort(self._rng.integers(low, high, size=count, endpoint=True))]

    def words(self, count: int) -> List[str]:
        return [self._resolve_faker_method('word') for _ in range(count)]

    def length(self, low: int = 0, high: int = 20) -> int:
        return int(self._rng.integers(low, high, endpoint=True))


class _SeededProvider:
    def __init__(self, seed: Optional[int] = None):
        self._generator = Generator(seed)

    @property
    def generator(self) -> Generator:
        return self._generator

    def ints(self, count: int, low: int = 0, high: int = 100) -> Cursor[int]:
        return array(self._generator.ints(count, low, high))

    def sorted_ints(self, count: int, low: int = 0, high: int = 10) -> Cursor[int]:
        return array(self._generator.sorted_ints(count, low, high))

    def words(self, count: int) -> Cursor[str]:
        return array(self._generator.words(count))


def from_seed(seed: Optional[int] = None) -> _SeededProvider:
    """cursor-producing test data generator, reproducible for a given seed"""
    return _SeededProvider(seed)
