from typing import Optional


class CollectionError(RuntimeError):
    pass


class TypeMismatchError(CollectionError, TypeError):
    def __init__(self, actual_type: str):
        super().__init__(f"Unexpected type given: {actual_type}")
        self.actual_type = actual_type


class DecodeError(CollectionError, ValueError):
    pass


class EncodeError(CollectionError, ValueError):
    pass


class ReadOnlyError(CollectionError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "collection is read-only")


class ConfigError(CollectionError):
    pass


__all__ = ("CollectionError", "TypeMismatchError", "DecodeError", "EncodeError",
           "ReadOnlyError", "ConfigError")
