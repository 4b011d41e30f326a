from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..cursor import Cursor


class TerminalAccessor(Generic[T]):
    """eager conversions. each one reads a copy, the cursor itself stays put."""

    def __init__(self, cursor_instance: 'Cursor[T]'):
        self._cursor = cursor_instance

    def list(self) -> List[T]:
        """convert to list"""
        return [*self._cursor]

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._cursor)

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list(), dtype=dtype)

    def pandas(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list(), name=name)

    def count(self) -> int:
        """number of remaining elements"""
        from .algorithms import size
        return size(self._cursor)

    def sum(self, start: T = 0) -> T:
        """start plus every element"""
        from .algorithms import total
        return total(self._cursor, start)

    def prod(self, start: T = 1) -> T:
        """start times every element"""
        from .algorithms import product
        return product(self._cursor, start)

    def first(self) -> T:
        """get first element"""
        if not self._cursor.has_more(): raise ValueError("sequence contains no elements")
        return self._cursor.current()

    def take(self, n: int) -> List[T]:
        """at most n elements as a list, safe on infinite sequences"""
        result = []
        cursor = self._cursor.copy()
        while len(result) < n and cursor.has_more():
            result.append(cursor.current())
            cursor.advance()
        return result
