from __future__ import annotations
import operator
from ..cursor import Cursor
from ..types import *


class Apply(Cursor[U]):
    """func(x) for each x. not cached: every read calls func again."""

    def __init__(self, func: Selector[T, U], inner: Cursor[T]):
        self._func = func
        self._inner = inner
        self.tier = min(inner.tier, Tier.RANDOM_ACCESS)

    def has_more(self) -> bool:
        return self._inner.has_more()

    def current(self) -> U:
        return self._func(self._inner.current())

    def advance(self) -> None:
        self._inner.advance()

    def retreat(self) -> None:
        self._require_tier(Tier.BIDIRECTIONAL, 'retreat')
        self._inner.retreat()

    def offset(self, d: int) -> None:
        self._require_tier(Tier.RANDOM_ACCESS, 'offset')
        self._inner.offset(d)

    def distance(self, other: 'Apply[U]') -> int:
        self._require_tier(Tier.RANDOM_ACCESS, 'distance')
        return self._inner.distance(other._inner)

    def index(self, d: int) -> U:
        self._require_tier(Tier.RANDOM_ACCESS, 'index')
        return self._func(self._inner.index(d))

    def equals(self, other: 'Apply[U]') -> bool:
        # the function is part of the adaptor's identity, not its position
        return self._inner.equals(other._inner)


class Filter(Cursor[T]):
    """elements satisfying a predicate. never rests on an element that fails it."""

    def __init__(self, predicate: Predicate[T], inner: Cursor[T]):
        self._predicate = predicate
        self._inner = inner
        self.tier = min(inner.tier, Tier.FORWARD)
        self._skip()

    def _skip(self) -> None:
        while self._inner.has_more() and not self._predicate(self._inner.current()):
            self._inner.advance()

    def has_more(self) -> bool:
        return self._inner.has_more()

    def current(self) -> T:
        return self._inner.current()

    def advance(self) -> None:
        self._inner.advance()
        self._skip()

    # copy() is inherited unchanged: the source already sits on a match, so no re-scan

    def equals(self, other: 'Filter[T]') -> bool:
        return self._inner.equals(other._inner)


class Until(Cursor[T]):
    """elements before the first one satisfying a predicate"""

    def __init__(self, predicate: Predicate[T], inner: Cursor[T]):
        self._predicate = predicate
        self._inner = inner
        self.tier = min(inner.tier, Tier.FORWARD)

    def has_more(self) -> bool:
        return self._inner.has_more() and not self._predicate(self._inner.current())

    def current(self) -> T:
        return self._inner.current()

    def advance(self) -> None:
        self._inner.advance()

    def equals(self, other: 'Until[T]') -> bool:
        return self._inner.equals(other._inner)


class Fold(Cursor[U]):
    """
    running left fold: seed, op(seed, x0), op(op(seed, x0), x1), ...

    yields one value more than the inner sequence has elements, the seed
    first and the complete reduction last. advancing once the final value has
    been passed does nothing.
    """

    def __init__(self, op: BinaryOp[U, T], inner: Cursor[T], seed: U = 0):
        self._op = op
        self._inner = inner
        self._acc = seed
        self._spent = False
        self.tier = min(inner.tier, Tier.FORWARD)

    def has_more(self) -> bool:
        return not self._spent

    def current(self) -> U:
        self._require_more('read')
        return self._acc

    def advance(self) -> None:
        if self._inner.has_more():
            self._acc = self._op(self._acc, self._inner.current())
            self._inner.advance()
        else:
            self._spent = True

    def equals(self, other: 'Fold[U]') -> bool:
        return (self._spent == other._spent
                and self._acc == other._acc
                and self._inner.equals(other._inner))


class Delta(Cursor[U]):
    """
    op(x1, x0), op(x2, x1), ... one element shorter than the inner sequence.
    the first inner element is consumed at construction as the baseline.
    """

    def __init__(self, inner: Cursor[T], op: Difference[T, U] = operator.sub):
        self._op = op
        self._inner = inner
        self._baseline = None
        self.tier = min(inner.tier, Tier.FORWARD)
        if inner.has_more():
            self._baseline = inner.current()
            inner.advance()

    def has_more(self) -> bool:
        return self._inner.has_more()

    def current(self) -> U:
        self._require_more('read')
        return self._op(self._inner.current(), self._baseline)

    def advance(self) -> None:
        if self._inner.has_more():
            self._baseline = self._inner.current()
            self._inner.advance()

    def equals(self, other: 'Delta[U]') -> bool:
        return self._baseline == other._baseline and self._inner.equals(other._inner)


def uptick(i: Cursor[T]) -> 'Delta[T]':
    """rises between consecutive elements, 0 where the sequence falls"""
    return Delta(i, lambda current, previous: max(current - previous, 0))


def downtick(i: Cursor[T]) -> 'Delta[T]':
    """falls between consecutive elements, 0 where the sequence rises. uptick + downtick = delta."""
    return Delta(i, lambda current, previous: min(current - previous, 0))
