from itertools import tee
import numpy as np
from .cursor import Cursor
from .types import *
from .extensions.bounded import Counted, array, take
from .extensions.numeric import Iota, Constant
from .extensions.pointer import empty

_missing = object()


class IterCursor(Cursor[T]):
    """
    cursor over a python iterator with one element of lookahead.
    copies tee the iterator, so they advance independently.
    """
    tier = Tier.FORWARD

    def __init__(self, iterable: Iterable[T]):
        self._it = iter(iterable)
        self._head = _missing
        self._done = False

    def _fill(self) -> None:
        if self._head is _missing and not self._done:
            try:
                self._head = next(self._it)
            except StopIteration:
                self._done = True

    def has_more(self) -> bool:
        self._fill()
        return not self._done

    def current(self) -> T:
        self._require_more('read')
        return self._head

    def advance(self) -> None:
        self._require_more('advance')
        self._head = _missing

    def copy(self) -> 'IterCursor[T]':
        self._it, other = tee(self._it)
        clone = object.__new__(IterCursor)
        clone.__dict__.update(self.__dict__, _it=other)
        return clone

    def equals(self, other: 'IterCursor[T]') -> bool:
        # positions in an iterator cannot be told apart, only exhaustion can
        return self is other or (not self.has_more() and not other.has_more())


class Generate(Cursor[T]):
    """func(), func(), ... forever. single pass: copies call the same func."""

    def __init__(self, func: Callable[[], T]):
        self._func = func
        self._value = func()

    def has_more(self) -> bool: return True

    def current(self) -> T: return self._value

    def advance(self) -> None:
        self._value = self._func()

    def equals(self, other: 'Generate[T]') -> bool:
        return self is other


def from_iterable(data: Iterable[T]) -> 'Cursor[T]':
    """create a cursor from any iterable. sized, indexable data stays random access."""
    if isinstance(data, Cursor):
        return data.copy()
    if isinstance(data, (list, tuple, range, np.ndarray)):
        return array(data)
    return IterCursor(data)


def from_list(values: Sequence[T]) -> 'Counted[T]':
    """bounded contiguous cursor over an indexable buffer"""
    return array(values)


def from_range(start: int, count: int) -> 'Counted[int]':
    """count integers from start"""
    return take(Iota(start), count)


def repeat(item: T, count: int) -> 'Counted[T]':
    """the same item count times"""
    return Counted(Constant(item), count)


def generate(generator_func: Callable[[], T]) -> 'Generate[T]':
    """infinite cursor calling a function for each element"""
    return Generate(generator_func)

# --- aliases ---
seq = from_iterable
S = from_iterable
