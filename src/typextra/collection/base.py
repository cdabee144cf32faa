from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import TypeVar, Generic, Optional, Any

_KT = TypeVar("_KT")
_VT = TypeVar("_VT")


class CollectionInterface(MutableMapping[_KT, _VT], Generic[_KT, _VT]):
    """
    ordered, key-unique container

    besides the mapping protocol a collection supports appending at the next
    integer offset, emptiness test, slicing by position and a read-only flag
    """

    @property
    @abstractmethod
    def read_only(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def add(self, value: _VT) -> "CollectionInterface[_KT, _VT]":
        raise NotImplementedError()

    @abstractmethod
    def slice(self, offset: int = 0, length: Optional[int] = None) -> "CollectionInterface[_KT, _VT]":
        raise NotImplementedError()

    def is_empty(self) -> bool:
        return len(self) == 0


class LazyObjectInterface(ABC):
    @abstractmethod
    def initialize(self) -> "LazyObjectInterface":
        raise NotImplementedError()

    @abstractmethod
    def is_initialized(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def get(self) -> Any:
        raise NotImplementedError()


__all__ = ("CollectionInterface", "LazyObjectInterface")
