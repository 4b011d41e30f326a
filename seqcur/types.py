from enum import IntEnum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
BinaryOp = Callable[[U, T], U]
Difference = Callable[[T, T], U]


class Tier(IntEnum):
    """traversal capability of a cursor, each tier includes the ones below it"""
    INPUT = 0
    FORWARD = 1
    BIDIRECTIONAL = 2
    RANDOM_ACCESS = 3
    CONTIGUOUS = 4


# --- errors ---

class SequenceError(Exception):
    """base class for errors raised by seqcur"""
    pass


class ExhaustedError(SequenceError, IndexError):
    """a cursor with no more elements was read, written or advanced"""
    pass


class CapabilityError(SequenceError, TypeError):
    """the cursor does not provide the requested operation"""
    pass


class IncompatibleCursorError(SequenceError, ValueError):
    """two cursors that do not traverse the same storage were related"""
    pass
