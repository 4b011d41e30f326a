"""
generic algorithms over the cursor contract.

every function works on copies of the cursors it is given, the way a value
parameter would, so the caller's cursors are never moved. capped operations
clamp at whatever is available instead of raising.
"""
from __future__ import annotations
import logging
import numpy as np
from ..cursor import Cursor
from ..types import *
from .bounded import Counted

logger = logging.getLogger(__name__)

# --- comparison ---

def compare(i: Cursor[T], j: Cursor[T], n: Optional[int] = None) -> int:
    """
    lexicographic three-way comparison: -1, 0 or 1.
    with n, only the first n pairs are looked at.
    """
    if n is not None and n < 0: raise ValueError("count must be non-negative")
    i, j = i.copy(), j.copy()
    while (n is None or n > 0) and i.has_more() and j.has_more():
        a, b = i.current(), j.current()
        if a < b: return -1
        if b < a: return 1
        i.advance()
        j.advance()
        if n is not None: n -= 1
    if n == 0: return 0
    # the shorter sequence orders first
    return int(i.has_more()) - int(j.has_more())


def equal(i: Cursor[T], j: Cursor[T], n: Optional[int] = None) -> bool:
    """all elements are equal and both sequences have the same length"""
    return compare(i, j, n) == 0


def equal_list(i: Cursor[T], values: Iterable[T]) -> bool:
    """i holds exactly these values"""
    i = i.copy()
    for value in values:
        if not i.has_more() or i.current() != value: return False
        i.advance()
    return not i.has_more()


def starts_with(i: Cursor[T], values: Iterable[T]) -> bool:
    """the first elements of i are these values"""
    i = i.copy()
    for value in values:
        if not i.has_more() or i.current() != value: return False
        i.advance()
    return True

# --- copying ---

def _is_bulk_copyable(src: Cursor, dst: Cursor) -> bool:
    if not (src.bounded and dst.bounded): return False
    if not (src.supports(Tier.CONTIGUOUS) and dst.supports(Tier.CONTIGUOUS)): return False
    # only numpy slices write through to the buffer
    return isinstance(dst.view(0), np.ndarray)


def _copy(src: Cursor[T], dst: Cursor[T], n: Optional[int]) -> Cursor[T]:
    if not dst.writable:
        raise CapabilityError(f"cannot copy into read-only {type(dst).__name__}")
    src, dst = src.copy(), dst.copy()

    if _is_bulk_copyable(src, dst):
        count = min(size(src), size(dst))
        if n is not None: count = min(count, n)
        logger.debug(f"bulk copy of {count} elements through numpy views")
        dst.view(count)[:] = src.view(count)
        dst.offset(count)
        return dst

    while (n is None or n > 0) and src.has_more() and dst.has_more():
        dst.set_current(src.current())
        src.advance()
        dst.advance()
        if n is not None: n -= 1
    return dst


def copy(src: Cursor[T], dst: Cursor[T]) -> Cursor[T]:
    """
    write src into dst until either runs out.
    returns dst advanced past the last element written.
    """
    return _copy(src, dst, None)


def copy_n(src: Cursor[T], dst: Cursor[T], n: int) -> Cursor[T]:
    """copy at most n elements"""
    if n < 0: raise ValueError("count must be non-negative")
    return _copy(src, dst, n)

# --- positions ---

def back(i: Cursor[T]) -> Cursor[T]:
    """cursor at the last element. an empty cursor is returned as is."""
    if not i.has_more():
        return i.copy()
    if i.bounded and i.supports(Tier.BIDIRECTIONAL):
        last = i.end()
        last.retreat()
        return last
    last, probe = i.copy(), i.copy()
    probe.advance()
    while probe.has_more():
        last.advance()
        probe.advance()
    return last


def end(i: Cursor[T]) -> Cursor[T]:
    """exhausted cursor one past back(i). for unbounded cursors this walks the sequence."""
    if i.bounded:
        return i.end()
    i = i.copy()
    while i.has_more():
        i.advance()
    return i


def size(i: Cursor[T], n: int = 0) -> int:
    """n plus the number of remaining elements, so size(i, size(j)) == size(i) + size(j)"""
    if isinstance(i, Counted):
        return n + i.remaining
    if i.bounded and i.supports(Tier.RANDOM_ACCESS):
        return n + i.end().distance(i)
    i = i.copy()
    while i.has_more():
        i.advance()
        n += 1
    return n


def drop(i: Cursor[T], n: int) -> Cursor[T]:
    """i advanced past at most n elements"""
    if n < 0: raise ValueError("count must be non-negative")
    i = i.copy()
    if i.bounded and i.supports(Tier.RANDOM_ACCESS):
        available = size(i)
        if available < n:
            logger.debug(f"drop clamped from {n} to {available} elements")
        i.offset(min(n, available))
        return i
    while n and i.has_more():
        i.advance()
        n -= 1
    return i

# --- reductions ---

def total(i: Cursor[T], start: T = 0) -> T:
    """start + x0 + x1 + ..."""
    i = i.copy()
    while i.has_more():
        start += i.current()
        i.advance()
    return start


def product(i: Cursor[T], start: T = 1) -> T:
    """start * x0 * x1 * ..."""
    i = i.copy()
    while i.has_more():
        start *= i.current()
        i.advance()
    return start
