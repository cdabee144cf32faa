from abc import ABC, abstractmethod
from enum import Enum

__all__ = ("EnumInterface", "ValueEnum", "LazyState",)


class EnumInterface(ABC):
    """
    capability of an enumerated constant exposing its string value
    """

    @abstractmethod
    def get_value(self) -> str:
        raise NotImplementedError()


# EnumMeta and ABCMeta don't mix, so enums join the interface by registration
@EnumInterface.register
class ValueEnum(str, Enum):
    def get_value(self) -> str:
        return self.value


class LazyState(ValueEnum):
    uninitialized = 'uninitialized'
    initializing = 'initializing'
    initialized = 'initialized'
    failed = 'failed'
