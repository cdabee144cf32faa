from collections import OrderedDict
from contextlib import nullcontext
from functools import partial
from threading import RLock
from typing import TypeVar, Generic, Callable, Optional, Iterator, Union, Dict, Any

from loguru import logger
from pydantic import ValidationError

from .base import CollectionInterface, LazyObjectInterface
from .collection import Collection
from ..config import get_config
from ..enums import LazyState
from ..errors import TypeMismatchError, DecodeError, EncodeError, ReadOnlyError, CollectionError
from ..model import PersistedCollection, PickledCollection, UnknownType

_KT = TypeVar("_KT")
_VT = TypeVar("_VT")

T_Initializer = Callable[[], CollectionInterface]


class LazyCollection(CollectionInterface[_KT, _VT], LazyObjectInterface, Generic[_KT, _VT]):
    """
    A collection whose entries are produced on first access.

    The initializer is called at most once, by the first operation that reads
    the collection (iteration, len, ``in``, item access, slice, is_empty, box).
    Everything afterwards is delegated to the collection it returned. A result
    which is not a ``CollectionInterface`` raises ``TypeMismatchError`` and
    leaves the instance failed for good: every later access raises it again.

    The lazy collection itself is always read-only. Entries have to be put
    into the collection inside the initializer.

    Serialization is asymmetric. ``serialize()`` (and pickling) realizes the
    collection before encoding it, while ``deserialize()`` (and unpickling)
    only installs an initializer that decodes the payload on first access.
    An invalid payload therefore surfaces as ``DecodeError`` from that first
    access, not from the restore call.
    """

    log_tag = "lazy_collection"

    def __init__(self, initializer: Optional[T_Initializer] = None):
        self._configure()
        self._read_only = True
        self._reset(initializer)

    def _configure(self):
        conf = get_config()
        self._lock = RLock() if conf.typextra_thread_safe else nullcontext()
        self._encoding = conf.typextra_serialization_encoding

    def _reset(self, initializer: Optional[T_Initializer]):
        self._initializer = initializer
        self._collection: CollectionInterface[_KT, _VT] = Collection()
        self._state = LazyState.uninitialized
        self._error: Optional[BaseException] = None

    def initialize(self) -> "LazyCollection[_KT, _VT]":
        if self._state is LazyState.initialized:
            return self

        with self._lock:
            if self._state is LazyState.failed:
                # drop the traceback of the previous raise
                raise self._error.with_traceback(None)

            # nothing to produce, or already entered by the initializer itself
            if self._state is not LazyState.uninitialized or self._initializer is None:
                return self

            self._state = LazyState.initializing
            try:
                collection = self._initializer()
                if not isinstance(collection, CollectionInterface):
                    raise TypeMismatchError(type(collection).__name__)
            except BaseException as e:
                self._initializer = None
                self._error = e
                self._state = LazyState.failed
                raise

            self._collection = collection
            self._initializer = None
            self._state = LazyState.initialized
            logger.trace(f"[{self.log_tag}] initialized with a {type(collection).__name__}")

        return self

    def set_initializer(self, initializer: Optional[T_Initializer]) -> "LazyCollection[_KT, _VT]":
        self._initializer = initializer
        return self

    def get_initializer(self) -> Optional[T_Initializer]:
        return self._initializer

    def set_collection(self, collection: CollectionInterface[_KT, _VT]) -> "LazyCollection[_KT, _VT]":
        if not isinstance(collection, CollectionInterface):
            raise TypeMismatchError(type(collection).__name__)
        if self._state is LazyState.initialized:
            raise CollectionError("cannot replace the collection of an initialized lazy collection")
        self._collection = collection
        return self

    def get_collection(self) -> CollectionInterface[_KT, _VT]:
        """
        Get the internally stored collection without initializing.
        """
        return self._collection

    def is_initialized(self) -> bool:
        return self._state is LazyState.initialized

    @property
    def state(self) -> LazyState:
        return self._state

    @property
    def read_only(self) -> bool:
        return self._read_only

    def __iter__(self) -> Iterator[_KT]:
        self.initialize()
        return iter(self._collection)

    def is_empty(self) -> bool:
        self.initialize()
        return self._collection.is_empty()

    def __len__(self) -> int:
        self.initialize()
        return len(self._collection)

    def __contains__(self, key) -> bool:
        self.initialize()
        return key in self._collection

    def __getitem__(self, key: _KT) -> _VT:
        self.initialize()
        return self._collection[key]

    def slice(self, offset: int = 0, length: Optional[int] = None) -> CollectionInterface[_KT, _VT]:
        self.initialize()
        return self._collection.slice(offset, length)

    def _ensure_writable(self):
        if not self._read_only:
            # a pending restore may turn the flag back on
            self.initialize()
        if self._read_only:
            raise ReadOnlyError("lazy collection is read-only")

    def __setitem__(self, key: _KT, value: _VT) -> None:
        self._ensure_writable()
        self._collection[key] = value

    def __delitem__(self, key: _KT) -> None:
        self._ensure_writable()
        del self._collection[key]

    def add(self, value: _VT) -> "LazyCollection[_KT, _VT]":
        self._ensure_writable()
        self._collection.add(value)
        return self

    # the mixins would succeed silently on empty or missing entries
    def pop(self, key: _KT, *args) -> _VT:
        self._ensure_writable()
        return self._collection.pop(key, *args)

    def popitem(self):
        self._ensure_writable()
        return self._collection.popitem()

    def clear(self) -> None:
        self._ensure_writable()
        self._collection.clear()

    def box(self) -> UnknownType[CollectionInterface[_KT, _VT]]:
        self.initialize()
        return UnknownType(self._collection)

    def get(self, *args) -> Any:
        """
        Without arguments, box the realized collection as an ``UnknownType``.
        With a key (and an optional default), behave like ``Mapping.get``.
        """
        if not args:
            return self.box()
        return super().get(*args)

    def _pin(self) -> Dict[str, Any]:
        with self._lock:
            self.initialize()
            self._initializer = None
            self._state = LazyState.initialized
            return {"entities": list(self._collection.items()), "readonly": self._read_only}

    def serialize(self) -> bytes:
        state = self._pin()
        try:
            persisted = PersistedCollection.model_validate(state)
            data = persisted.model_dump_json()
        except ValueError as e:
            raise EncodeError(f"cannot encode collection: {e}") from e

        logger.trace(f"[{self.log_tag}] serialized {len(persisted.entities)} entries")
        return data.encode(self._encoding)

    def deserialize(self, data: Union[bytes, str]) -> None:
        with self._lock:
            self._reset(partial(self._decode, data))
        logger.trace(f"[{self.log_tag}] restore scheduled, decoding deferred to first access")

    def _decode(self, data: Union[bytes, str]) -> CollectionInterface[_KT, _VT]:
        try:
            if isinstance(data, bytes):
                data = data.decode(self._encoding)
            persisted = PersistedCollection.model_validate_json(data)
        except (UnicodeDecodeError, ValidationError) as e:
            raise DecodeError(f"invalid serialized collection: {e}") from e
        return self._restore(persisted)

    def _decode_state(self, state: Any) -> CollectionInterface[_KT, _VT]:
        try:
            persisted = PickledCollection.model_validate(state)
        except ValidationError as e:
            raise DecodeError(f"invalid pickled collection: {e}") from e
        return self._restore(persisted)

    def _restore(self, persisted: Union[PersistedCollection, PickledCollection]) -> CollectionInterface[_KT, _VT]:
        try:
            collection = Collection(OrderedDict(persisted.entities))
        except TypeError as e:
            raise DecodeError(f"invalid serialized collection key: {e}") from e

        self._read_only = persisted.readonly
        return collection

    def __getstate__(self) -> Dict[str, Any]:
        return self._pin()

    def __setstate__(self, state: Dict[str, Any]) -> None:
        # raising here would break unpickling, so the state is validated on first access
        self._configure()
        self._read_only = True
        self._reset(partial(self._decode_state, state))

    def __repr__(self):
        if self._state is LazyState.initialized:
            return f"{type(self).__name__}({self._collection!r})"
        return f"<{type(self).__name__} state={self._state.get_value()}>"


__all__ = ("LazyCollection",)
