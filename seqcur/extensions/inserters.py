from __future__ import annotations
from ..cursor import Cursor
from ..types import *


class _Inserter(Cursor[T]):
    """write-only cursor onto a host collection. never runs out, advancing does nothing."""
    writable = True

    def __init__(self, container: Any):
        self._container = container

    @property
    def container(self) -> Any:
        return self._container

    def has_more(self) -> bool: return True

    def current(self) -> T:
        raise CapabilityError(f"{type(self).__name__} is write-only")

    def advance(self) -> None: pass

    def equals(self, other: '_Inserter[T]') -> bool:
        return self._container is other._container


class BackInserter(_Inserter[T]):
    def set_current(self, value: T) -> None:
        self._container.append(value)


class FrontInserter(_Inserter[T]):
    def set_current(self, value: T) -> None:
        # deque-like containers have appendleft, lists only insert
        if hasattr(self._container, 'appendleft'):
            self._container.appendleft(value)
        else:
            self._container.insert(0, value)


def back_inserter(container: Any) -> 'BackInserter[Any]':
    return BackInserter(container)


def front_inserter(container: Any) -> 'FrontInserter[Any]':
    return FrontInserter(container)
