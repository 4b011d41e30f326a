from __future__ import annotations

import typing
from abc import ABC, abstractmethod

from .config import settings
from .types import *

# --- fluent operations ---
from .extensions.core import _CoreOperations

if typing.TYPE_CHECKING:
    from .extensions.terminal import TerminalAccessor

# --- abstract contract ---

class ICursor(ABC, Generic[T]):
    """the rest of a sequence from here, with its own exhaustion test"""

    @abstractmethod
    def has_more(self) -> bool:
        """true while current() and advance() are defined. never mutates."""
        pass

    @abstractmethod
    def current(self) -> T:
        """the element under the cursor, only valid while has_more()"""
        pass

    @abstractmethod
    def advance(self) -> None:
        """move to the next element"""
        pass

    @abstractmethod
    def equals(self, other: 'ICursor[T]') -> bool:
        """structural equality: same position and same residual bound"""
        pass

# --- base cursor implementation ---

class Cursor(ICursor[T], _CoreOperations[T]):
    """
    base class of every sequence in seqcur.

    capabilities are checked at runtime. `tier` says how the cursor can move,
    `writable` whether set_current() is allowed and `bounded` whether end()
    exists. adaptors set these per instance from the cursors they wrap.
    """
    tier: Tier = Tier.INPUT
    writable: bool = False
    bounded: bool = False

    def copy(self) -> 'Cursor[T]':
        """independent cursor at the same position. wrapped cursors are copied, everything else is shared."""
        clone = object.__new__(type(self))
        clone.__dict__.update({
            key: value.copy() if isinstance(value, ICursor) else value
            for key, value in self.__dict__.items()
        })
        return clone

    def supports(self, tier: Tier) -> bool:
        return self.tier >= tier

    # --- optional capabilities ---
    # hooks a tier requires: a subclass claiming the tier must override them

    def set_current(self, value: T) -> None:
        """overwrite the element under the cursor"""
        raise CapabilityError(f"{type(self).__name__} is not writable")

    def retreat(self) -> None:
        """move to the previous element"""
        self._require_tier(Tier.BIDIRECTIONAL, 'retreat')
        self._missing_hook('retreat')

    def offset(self, d: int) -> None:
        """jump by a signed number of elements"""
        self._require_tier(Tier.RANDOM_ACCESS, 'offset')
        self._missing_hook('offset')

    def distance(self, other: 'Cursor[T]') -> int:
        """number of elements from other to self"""
        self._require_tier(Tier.RANDOM_ACCESS, 'distance')
        self._missing_hook('distance')

    def index(self, d: int) -> T:
        """element d positions away from the cursor"""
        self._require_tier(Tier.RANDOM_ACCESS, 'index')
        self._missing_hook('index')

    def view(self, count: int) -> Any:
        """linear slice of the underlying storage starting at the cursor"""
        self._require_tier(Tier.CONTIGUOUS, 'view')
        self._missing_hook('view')

    def begin(self) -> 'Cursor[T]':
        """the sequence as it stands, for two-cursor iteration"""
        return self.copy()

    def end(self) -> 'Cursor[T]':
        """exhausted sentinel reachable from begin() by advancing size() times"""
        raise CapabilityError(f"{type(self).__name__} is not bounded, use algorithms.end()")

    # --- precondition checks ---

    def _require_more(self, action: str) -> None:
        if settings.checked and not self.has_more():
            raise ExhaustedError(f"cannot {action} an exhausted {type(self).__name__}")

    def _require_tier(self, tier: Tier, action: str) -> None:
        if self.tier < tier:
            raise CapabilityError(
                f"{action} requires a {tier.name.lower()} cursor, "
                f"{type(self).__name__} is {self.tier.name.lower()}")

    def _missing_hook(self, action: str) -> None:
        raise NotImplementedError(
            f"{type(self).__name__} claims {self.tier.name.lower()} but does not implement {action}")

    def _require_writable(self) -> None:
        if not self.writable:
            raise CapabilityError(f"{type(self).__name__} is not writable")

    # --- python protocols ---

    def __bool__(self) -> bool:
        return self.has_more()

    def __iter__(self) -> Iterator[T]:
        # iterate a copy so the cursor itself is not consumed
        cursor = self.copy()
        while cursor.has_more():
            yield cursor.current()
            cursor.advance()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tier={self.tier.name.lower()}, has_more={self.has_more()})"

    @property
    def to(self) -> 'TerminalAccessor[T]':
        """terminal conversions (list, numpy array, pandas series, ...)"""
        from .extensions.terminal import TerminalAccessor
        return TerminalAccessor(self)
