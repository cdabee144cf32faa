from .persisted_collection import PersistedCollection, PickledCollection
from .unknown_type import UnknownType

__all__ = ("PersistedCollection", "PickledCollection", "UnknownType")
