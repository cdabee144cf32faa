import typing

from pydantic import BaseModel, ConfigDict, JsonValue


class PersistedCollection(BaseModel):
    """
    serialized form, only values json represents without loss are accepted
    """
    model_config = ConfigDict(extra="forbid", strict=True)

    entities: typing.List[typing.Tuple[typing.Union[int, str], JsonValue]]
    readonly: bool


class PickledCollection(BaseModel):
    """
    pickled form, entries are kept as python objects
    """
    model_config = ConfigDict(extra="forbid")

    entities: typing.List[typing.Tuple[typing.Any, typing.Any]]
    readonly: bool


__all__ = ("PersistedCollection", "PickledCollection")
