"""
typextra

Lazily initialized collections, boxed values and enum helpers.

@License        : MIT
"""

from .collection import CollectionInterface, LazyObjectInterface, Collection, LazyCollection
from .config import Config, get_config
from .enums import EnumInterface, ValueEnum, LazyState
from .errors import *
from .model import UnknownType

__all__ = ("CollectionInterface", "LazyObjectInterface", "Collection", "LazyCollection",
           "Config", "EnumInterface", "ValueEnum", "LazyState", "UnknownType", "get_config",
           "CollectionError", "TypeMismatchError", "DecodeError", "EncodeError",
           "ReadOnlyError", "ConfigError")
