from typing import Generic, TypeVar

T = TypeVar("T")


class UnknownType(Generic[T]):
    """
    boxes a realized value so it can be handled alongside values of any other type
    """

    __slots__ = ("_value",)

    def __init__(self, value: T):
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def get_value(self) -> T:
        return self._value

    def __eq__(self, other):
        if isinstance(other, UnknownType):
            return self._value == other._value
        return NotImplemented

    def __repr__(self):
        return f"UnknownType({self._value!r})"


__all__ = ("UnknownType",)
