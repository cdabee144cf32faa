from .base import CollectionInterface, LazyObjectInterface
from .collection import Collection
from .lazy_collection import LazyCollection

__all__ = ("CollectionInterface", "LazyObjectInterface", "Collection", "LazyCollection")
