"""Runtime settings for cppdoc, read from the environment."""

from __future__ import annotations

import codecs
import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "CPPDOC_"

# Span correction scans raw bytes for these characters, so an encoding must
# represent them as the same single bytes ASCII does.
_SCANNED = "\n;(),<>{}"


def check_encoding(value: str) -> str:
    """
    Validate a source encoding.

    Raises:
        ValueError: If the encoding is unknown or not ASCII-compatible
            (e.g. UTF-16 or UTF-32)
    """
    try:
        codecs.lookup(value)
        scanned = _SCANNED.encode(value)
    except LookupError as e:
        raise ValueError(f"Unknown encoding: {value}") from e
    except UnicodeError as e:
        raise ValueError(f"Encoding is not ASCII-compatible: {value}") from e
    if scanned != _SCANNED.encode("ascii"):
        raise ValueError(f"Encoding is not ASCII-compatible: {value}")
    return value


class Settings(BaseModel):
    """
    Settings shared by the source and comment layers.

    Environment variables:
        CPPDOC_ENCODING: Encoding of source buffers (default utf-8)
        CPPDOC_LOG_LEVEL: Stdlib logging level name (default WARNING)
        CPPDOC_MAX_WORKERS: Worker threads for per-entity assembly
    """

    encoding: str = "utf-8"
    log_level: str = "WARNING"
    max_workers: int | None = Field(default=None, ge=1)

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        return check_encoding(value)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from CPPDOC_* variables, ignoring unset ones."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw:
                values[name] = raw
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
