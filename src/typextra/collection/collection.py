from collections import OrderedDict
from collections.abc import Mapping
from typing import TypeVar, Generic, Iterator, Iterable, Optional, Union

from .base import CollectionInterface
from ..errors import ReadOnlyError

_KT = TypeVar("_KT")
_VT = TypeVar("_VT")


class Collection(CollectionInterface[_KT, _VT], Generic[_KT, _VT]):
    """
    ordered, key-unique collection

    built from a mapping the keys are kept, built from any other iterable
    the values get the integer offsets 0..n-1
    """

    def __init__(self, entities: Union[Mapping[_KT, _VT], Iterable[_VT], None] = None,
                 read_only: bool = False):
        self._data = OrderedDict[_KT, _VT]()
        self._next_offset = 0
        self._read_only = False

        if entities is not None:
            if isinstance(entities, Mapping):
                for key, value in entities.items():
                    self[key] = value
            else:
                for value in entities:
                    self.add(value)

        self._read_only = read_only

    @property
    def read_only(self) -> bool:
        return self._read_only

    @read_only.setter
    def read_only(self, value: bool):
        self._read_only = bool(value)

    def _ensure_writable(self):
        if self._read_only:
            raise ReadOnlyError()

    def add(self, value: _VT) -> "Collection[_KT, _VT]":
        self._ensure_writable()
        self[self._next_offset] = value
        return self

    def __setitem__(self, key: _KT, value: _VT) -> None:
        self._ensure_writable()
        self._data[key] = value
        # mirrors array append semantics: the next offset follows the greatest integer key
        if isinstance(key, int) and not isinstance(key, bool) and key >= self._next_offset:
            self._next_offset = key + 1

    def __delitem__(self, key: _KT) -> None:
        self._ensure_writable()
        del self._data[key]

    def __getitem__(self, key: _KT) -> _VT:
        return self._data[key]

    def __contains__(self, key) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[_KT]:
        return iter(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def slice(self, offset: int = 0, length: Optional[int] = None) -> "Collection[_KT, _VT]":
        """
        entries by position, keys preserved

        a negative offset counts from the end, a negative length stops
        that many entries before the end
        """
        items = list(self._data.items())
        size = len(items)

        start = offset if offset >= 0 else max(size + offset, 0)
        if length is None:
            stop = size
        elif length < 0:
            stop = size + length
        else:
            stop = start + length

        return Collection(OrderedDict(items[start:stop]))

    def first(self, default: Optional[_VT] = None) -> Optional[_VT]:
        for key in self._data:
            return self._data[key]
        return default

    def last(self, default: Optional[_VT] = None) -> Optional[_VT]:
        for key in reversed(self._data):
            return self._data[key]
        return default

    def __repr__(self):
        return f"{type(self).__name__}({dict(self._data)!r})"


__all__ = ("Collection",)
