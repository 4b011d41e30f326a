from __future__ import annotations
import typing
import operator
from ..types import *

if typing.TYPE_CHECKING:
    from ..cursor import Cursor


class _CoreOperations(Generic[T]):
    """chainable adaptors. each one wraps a copy, so the receiver stays where it is."""

    def where(self: 'Cursor[T]', predicate: Predicate[T]) -> 'Cursor[T]':
        """keep elements satisfying a predicate"""
        from .functional import Filter
        return Filter(predicate, self.copy())

    def select(self: 'Cursor[T]', selector: Selector[T, U]) -> 'Cursor[U]':
        """project each element to a new form"""
        from .functional import Apply
        return Apply(selector, self.copy())

    def take(self: 'Cursor[T]', count: int) -> 'Cursor[T]':
        """at most the first 'count' elements"""
        from .bounded import take
        return take(self.copy(), count)

    def skip(self: 'Cursor[T]', count: int) -> 'Cursor[T]':
        """everything after the first 'count' elements"""
        from .algorithms import drop
        return drop(self, count)

    def take_until(self: 'Cursor[T]', predicate: Predicate[T]) -> 'Cursor[T]':
        """elements up to, not including, the first one satisfying the predicate"""
        from .functional import Until
        return Until(predicate, self.copy())

    def scan(self: 'Cursor[T]', op: BinaryOp[U, T], seed: U = 0) -> 'Cursor[U]':
        """running reduction, seed first"""
        from .functional import Fold
        return Fold(op, self.copy(), seed)

    def deltas(self: 'Cursor[T]', op: Difference[T, U] = operator.sub) -> 'Cursor[U]':
        """op(next, previous) for each consecutive pair"""
        from .functional import Delta
        return Delta(self.copy(), op)

    def concat(self: 'Cursor[T]', *others: 'Cursor[T]') -> 'Cursor[T]':
        """this sequence followed by the others"""
        from .structural import concatenate
        return concatenate(self.copy(), *[other.copy() for other in others])

    def merge_with(self: 'Cursor[T]', *others: 'Cursor[T]',
                   key: Optional[KeySelector[T, K]] = None) -> 'Cursor[T]':
        """ordered merge with other sorted sequences"""
        from .structural import merge
        return merge(self.copy(), *[other.copy() for other in others], key=key)

    def cycle(self: 'Cursor[T]') -> 'Cursor[T]':
        """repeat this finite sequence forever"""
        from .structural import Cycle
        return Cycle(self.copy())
