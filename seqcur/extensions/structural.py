from __future__ import annotations
import logging
from ..cursor import Cursor
from ..types import *

logger = logging.getLogger(__name__)


def _common_tier(*cursors: Cursor) -> Tier:
    return min(Tier.FORWARD, *(c.tier for c in cursors))

# --- concatenation ---

class Concatenate2(Cursor[T]):
    """all of first, then all of second"""

    def __init__(self, first: Cursor[T], second: Cursor[U]):
        self._first = first
        self._second = second
        self.tier = _common_tier(first, second)

    def has_more(self) -> bool:
        return self._first.has_more() or self._second.has_more()

    def current(self) -> Union[T, U]:
        if self._first.has_more():
            return self._first.current()
        self._require_more('read')
        return self._second.current()

    def advance(self) -> None:
        if self._first.has_more():
            self._first.advance()
        elif self._second.has_more():
            self._second.advance()

    def equals(self, other: 'Concatenate2[T]') -> bool:
        return self._first.equals(other._first) and self._second.equals(other._second)


def concatenate(*cursors: Cursor[T]) -> Cursor[T]:
    """c0, then c1, ... built as c0 + (c1 + (c2 + ...))"""
    if not cursors: raise ValueError("concatenate requires at least one cursor")
    head, *rest = cursors
    if not rest: return head
    return Concatenate2(head, concatenate(*rest))

# --- ordered merge ---

class Merge2(Cursor[T]):
    """
    stable merge of two sorted sequences.

    a strictly lesser element is always taken first. equivalent elements are
    all kept and alternate between the two sides: the bias flag names the side
    to draw on a tie and flips every time a tie is consumed. the flag is also
    pointed at whichever side is drawn without a tie, so a run of equal values
    starts from the side that produced the last smaller one.
    """

    def __init__(self, first: Cursor[T], second: Cursor[T],
                 key: Optional[KeySelector[T, K]] = None):
        self._first = first
        self._second = second
        self._key = key
        self._use_first = True
        self.tier = _common_tier(first, second)
        self._settle()

    def _order(self) -> int:
        """-1 if first is strictly less, 1 if second is, 0 on a tie"""
        a, b = self._first.current(), self._second.current()
        if self._key is not None:
            a, b = self._key(a), self._key(b)
        if a < b: return -1
        if b < a: return 1
        return 0

    def _settle(self) -> None:
        # point the bias at the side to draw, unless it is a tie
        if self._first.has_more() and self._second.has_more():
            order = self._order()
            if order: self._use_first = order < 0
        else:
            self._use_first = self._first.has_more()

    def has_more(self) -> bool:
        return self._first.has_more() or self._second.has_more()

    def current(self) -> T:
        self._require_more('read')
        return self._first.current() if self._use_first else self._second.current()

    def advance(self) -> None:
        if not self.has_more(): return
        tie = self._first.has_more() and self._second.has_more() and self._order() == 0
        if self._use_first:
            self._first.advance()
        else:
            self._second.advance()
        if tie:
            self._use_first = not self._use_first
        self._settle()

    def equals(self, other: 'Merge2[T]') -> bool:
        return (self._use_first == other._use_first
                and self._first.equals(other._first)
                and self._second.equals(other._second))


def merge(*cursors: Cursor[T], key: Optional[KeySelector[T, K]] = None) -> Cursor[T]:
    """n-way ordered merge built as merge2(c0, merge2(c1, ...))"""
    if not cursors: raise ValueError("merge requires at least one cursor")
    head, *rest = cursors
    if not rest: return head
    return Merge2(head, merge(*rest, key=key), key=key)

# --- cyclic repetition ---

class Cycle(Cursor[T]):
    """
    a finite sequence repeated forever. an empty source gives an empty cycle
    instead of spinning.
    """

    def __init__(self, source: Cursor[T]):
        if not source.supports(Tier.FORWARD):
            raise CapabilityError("cycle needs a forward cursor to restart from")
        self._source = source
        self._start = source.copy()
        self.tier = Tier.FORWARD
        self.writable = source.writable
        if not source.has_more():
            logger.debug("cycle over an empty source is empty")

    def has_more(self) -> bool:
        return self._source.has_more()

    def current(self) -> T:
        self._require_more('read')
        return self._source.current()

    def set_current(self, value: T) -> None:
        self._require_more('write')
        self._require_writable()
        self._source.set_current(value)

    def advance(self) -> None:
        if not self._source.has_more(): return
        self._source.advance()
        if not self._source.has_more():
            self._source = self._start.copy()

    def equals(self, other: 'Cycle[T]') -> bool:
        return self._source.equals(other._source) and self._start.equals(other._start)


def cycle(source: Cursor[T]) -> 'Cycle[T]':
    return Cycle(source)
