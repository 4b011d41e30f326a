from __future__ import annotations
from ..cursor import Cursor
from ..types import *
from .bounded import Counted

# --- infinite recurrences ---

class Iota(Cursor[T]):
    """start, start + step, start + 2*step, ..."""
    tier = Tier.FORWARD

    def __init__(self, start: T = 0, step: T = 1):
        self._t = start
        self._step = step

    def has_more(self) -> bool: return True

    def current(self) -> T: return self._t

    def advance(self) -> None:
        self._t += self._step

    def equals(self, other: 'Iota[T]') -> bool:
        return self._t == other._t and self._step == other._step

    def __repr__(self) -> str:
        return f"Iota(t={self._t}, step={self._step})"


class Power(Cursor[T]):
    """start, start*base, start*base*base, ..."""
    tier = Tier.FORWARD

    def __init__(self, base: T, start: T = 1):
        self._base = base
        self._tn = start

    def has_more(self) -> bool: return True

    def current(self) -> T: return self._tn

    def advance(self) -> None:
        self._tn *= self._base

    def equals(self, other: 'Power[T]') -> bool:
        return self._base == other._base and self._tn == other._tn


class Factorial(Cursor[T]):
    """1, 1, 1*2, 1*2*3, ... (scaled by start)"""
    tier = Tier.FORWARD

    def __init__(self, start: T = 1):
        self._value = start
        self._multiplier = 1

    def has_more(self) -> bool: return True

    def current(self) -> T: return self._value

    def advance(self) -> None:
        self._value *= self._multiplier
        self._multiplier += 1

    def equals(self, other: 'Factorial[T]') -> bool:
        return self._value == other._value and self._multiplier == other._multiplier


class Constant(Cursor[T]):
    """the same value forever. every move is a no-op and all positions coincide."""
    tier = Tier.RANDOM_ACCESS

    def __init__(self, value: T):
        self._value = value

    def has_more(self) -> bool: return True

    def current(self) -> T: return self._value

    def advance(self) -> None: pass

    def retreat(self) -> None: pass

    def offset(self, d: int) -> None: pass

    def distance(self, other: 'Constant[T]') -> int: return 0

    def index(self, d: int) -> T: return self._value

    def equals(self, other: 'Constant[T]') -> bool:
        return self._value == other._value


def once(value: T) -> 'Counted[T]':
    """a sequence holding a single value"""
    return Counted(Constant(value), 1)

# --- finite ---

class Choose(Cursor[int]):
    """
    binomial coefficients c(n, 0), c(n, 1), ..., c(n, n).

    uses the multiplicative recurrence c(n, k+1) = c(n, k) * (n - k) / (k + 1),
    which is exact in integer arithmetic, instead of dividing factorials.
    """
    tier = Tier.FORWARD
    bounded = True

    def __init__(self, n: int):
        if n < 0: raise ValueError("n must be non-negative")
        self._n = n
        self._k = 0
        self._nk = 1

    @classmethod
    def _at(cls, n: int, k: int, nk: int) -> 'Choose':
        c = cls(n)
        c._k, c._nk = k, nk
        return c

    def has_more(self) -> bool:
        return self._k <= self._n

    def current(self) -> int:
        self._require_more('read')
        return self._nk

    def advance(self) -> None:
        if self.has_more():
            self._nk = self._nk * (self._n - self._k) // (self._k + 1)
            self._k += 1

    def end(self) -> 'Choose':
        return Choose._at(self._n, self._n + 1, 0)

    def equals(self, other: 'Choose') -> bool:
        return (self._n, self._k, self._nk) == (other._n, other._k, other._nk)

    def __repr__(self) -> str:
        return f"Choose(n={self._n}, k={self._k})"
