from __future__ import annotations
import numpy as np
from ..config import settings
from ..cursor import Cursor
from ..types import *


def _is_writable(buffer: Any) -> bool:
    if buffer is None: return False
    if isinstance(buffer, np.ndarray): return bool(buffer.flags.writeable)
    return hasattr(buffer, '__setitem__')


class Ptr(Cursor[T]):
    """
    position in an indexable buffer, the python stand-in for a raw pointer.

    (buffer, position) is the address and a buffer of none is the null pointer.
    a non-null pointer always has more: it knows nothing about where the
    storage ends, so pair it with Counted or Interval to get a bounded sequence.
    the buffer is borrowed, never copied.
    """
    tier = Tier.CONTIGUOUS

    def __init__(self, buffer: Optional[Sequence[T]] = None, position: int = 0):
        self._buffer = buffer
        self._position = position
        self.writable = _is_writable(buffer)

    @property
    def buffer(self) -> Optional[Sequence[T]]:
        return self._buffer

    @property
    def position(self) -> int:
        return self._position

    def has_more(self) -> bool:
        return self._buffer is not None

    def current(self) -> T:
        self._require_more('read')
        self._check_position(self._position)
        return self._buffer[self._position]

    def set_current(self, value: T) -> None:
        self._require_more('write')
        self._require_writable()
        self._check_position(self._position)
        self._buffer[self._position] = value

    def advance(self) -> None:
        self._require_more('advance')
        self._position += 1

    def retreat(self) -> None:
        self._require_more('retreat')
        self._position -= 1

    def offset(self, d: int) -> None:
        self._require_more('offset')
        self._position += d

    def distance(self, other: 'Ptr[T]') -> int:
        if settings.checked and (not isinstance(other, Ptr) or other._buffer is not self._buffer):
            raise IncompatibleCursorError("pointers into different buffers have no distance")
        return self._position - other._position

    def index(self, d: int) -> T:
        self._require_more('index')
        self._check_position(self._position + d)
        return self._buffer[self._position + d]

    def view(self, count: int) -> Sequence[T]:
        """buffer[position:position + count]. a real view for numpy arrays, a copy otherwise."""
        self._require_more('view')
        return self._buffer[self._position:self._position + count]

    def equals(self, other: 'Ptr[T]') -> bool:
        return self._buffer is other._buffer and self._position == other._position

    def _check_position(self, position: int) -> None:
        # python would silently wrap negative positions
        if settings.checked and not 0 <= position < len(self._buffer):
            raise ExhaustedError(f"position {position} is outside a buffer of {len(self._buffer)} elements")

    def __repr__(self) -> str:
        if self._buffer is None: return "Ptr(null)"
        return f"Ptr(position={self._position}, buffer={type(self._buffer).__name__}[{len(self._buffer)}])"


def empty() -> 'Ptr[Any]':
    """the sequence with no elements: a null pointer"""
    return Ptr()
