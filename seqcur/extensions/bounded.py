from __future__ import annotations
import logging
import numpy as np
from ..cursor import Cursor
from ..types import *
from .pointer import Ptr

logger = logging.getLogger(__name__)


class Interval(Cursor[T]):
    """
    iterable over [b, e): has more while b and e are not structurally equal.
    advancing past e is a precondition violation.
    """
    bounded = True

    def __init__(self, b: Cursor[T], e: Cursor[T]):
        self._b = b
        self._e = e
        self.tier = b.tier
        self.writable = b.writable

    def has_more(self) -> bool:
        return not self._b.equals(self._e)

    def current(self) -> T:
        self._require_more('read')
        return self._b.current()

    def set_current(self, value: T) -> None:
        self._require_more('write')
        self._require_writable()
        self._b.set_current(value)

    def advance(self) -> None:
        self._require_more('advance')
        self._b.advance()

    def retreat(self) -> None:
        self._require_tier(Tier.BIDIRECTIONAL, 'retreat')
        self._b.retreat()

    def offset(self, d: int) -> None:
        self._require_tier(Tier.RANDOM_ACCESS, 'offset')
        self._b.offset(d)

    def distance(self, other: 'Interval[T]') -> int:
        self._require_tier(Tier.RANDOM_ACCESS, 'distance')
        return self._b.distance(other._b)

    def index(self, d: int) -> T:
        self._require_tier(Tier.RANDOM_ACCESS, 'index')
        return self._b.index(d)

    def view(self, count: int) -> Any:
        self._require_tier(Tier.CONTIGUOUS, 'view')
        return self._b.view(count)

    def end(self) -> 'Interval[T]':
        return Interval(self._e.copy(), self._e.copy())

    def equals(self, other: 'Interval[T]') -> bool:
        return self._b.equals(other._b) and self._e.equals(other._e)


class Counted(Cursor[T]):
    """
    iterable over [i, i + n): wraps any cursor with a remaining count.
    advancing at a count of zero does nothing.
    """
    bounded = True

    def __init__(self, inner: Cursor[T], n: int):
        if n < 0: raise ValueError("count must be non-negative")
        self._inner = inner
        self._n = n
        self.tier = inner.tier
        self.writable = inner.writable

    @property
    def remaining(self) -> int:
        return self._n

    def has_more(self) -> bool:
        return self._n != 0

    def current(self) -> T:
        self._require_more('read')
        return self._inner.current()

    def set_current(self, value: T) -> None:
        self._require_more('write')
        self._require_writable()
        self._inner.set_current(value)

    def advance(self) -> None:
        if self._n:
            self._inner.advance()
            self._n -= 1

    def retreat(self) -> None:
        self._require_tier(Tier.BIDIRECTIONAL, 'retreat')
        self._inner.retreat()
        self._n += 1

    def offset(self, d: int) -> None:
        self._require_tier(Tier.RANDOM_ACCESS, 'offset')
        self._inner.offset(d)
        self._n -= d

    def distance(self, other: 'Counted[T]') -> int:
        self._require_tier(Tier.RANDOM_ACCESS, 'distance')
        return self._inner.distance(other._inner)

    def index(self, d: int) -> T:
        self._require_tier(Tier.RANDOM_ACCESS, 'index')
        return self._inner.index(d)

    def view(self, count: int) -> Any:
        self._require_tier(Tier.CONTIGUOUS, 'view')
        return self._inner.view(count)

    def end(self) -> 'Counted[T]':
        from .algorithms import drop
        last = self._inner.copy()
        if last.supports(Tier.RANDOM_ACCESS):
            last.offset(self._n)
        else:
            last = drop(last, self._n)
        return Counted(last, 0)

    def equals(self, other: 'Counted[T]') -> bool:
        return self._n == other._n and self._inner.equals(other._inner)

    def __repr__(self) -> str:
        return f"Counted(remaining={self._n}, inner={self._inner!r})"


def array(buffer: Union[np.ndarray, Sequence[T], Iterable[T]]) -> 'Counted[T]':
    """bounded contiguous sequence over a whole buffer. the buffer is borrowed, not copied."""
    if not isinstance(buffer, np.ndarray) and not hasattr(buffer, '__getitem__'):
        buffer = list(buffer)
    return Counted(Ptr(buffer), len(buffer))


def make_interval(container: Sequence[T]) -> 'Interval[T]':
    """[begin, end) of an indexable container"""
    return Interval(Ptr(container, 0), Ptr(container, len(container)))


def take(i: Cursor[T], n: int) -> 'Counted[T]':
    """the first min(n, size(i)) elements of i. never walks past n, so infinite cursors are fine."""
    if n < 0: raise ValueError("count must be non-negative")
    if not i.supports(Tier.FORWARD):
        # a single-pass cursor cannot be probed, the count is trusted
        return Counted(i, n)
    probe = i.copy()
    available = 0
    while available < n and probe.has_more():
        probe.advance()
        available += 1
    if available < n:
        logger.debug(f"take clamped from {n} to {available} elements")
    return Counted(i, available)
