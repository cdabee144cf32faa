import codecs
from functools import lru_cache

from loguru import logger
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError


class Config(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    typextra_thread_safe: bool = True
    typextra_serialization_encoding: str = "utf-8"

    @field_validator('typextra_serialization_encoding', mode="after")
    @classmethod
    def serialization_encoding_validator(cls, v):
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f'illegal typextra_serialization_encoding value: {v}')
        return v


@lru_cache(maxsize=None)
def get_config() -> Config:
    """
    settings are read from the environment on the first call and cached,
    call ``get_config.cache_clear()`` to read them again
    """
    try:
        conf = Config()
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e

    logger.debug(f"[config] loaded {conf!r}")
    return conf


__all__ = ("Config", "get_config")
