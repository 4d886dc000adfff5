"""
Configuration models.

Provides Pydantic models for contentdigest configuration with validation.
"""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import DigestBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]

ALGORITHM_NAME_PATTERN = re.compile(r"^[a-z0-9]+(?:[.+_-][a-z0-9]+)*$")

DEFAULT_CHUNK_SIZE = 1024 * 1024


class ConfigBaseModel(DigestBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",
    )


class DigestConfig(ConfigBaseModel):
    """Digest computation configuration section."""

    algorithm: str = "sha256"
    chunk_size: Annotated[int, Field(gt=0)] = DEFAULT_CHUNK_SIZE
    load_plugins: bool = True

    @field_validator("algorithm", mode="before")
    @classmethod
    def validate_algorithm(cls, v: str | None) -> str:
        """Empty selects the canonical algorithm; otherwise enforce the name grammar."""
        if v is None or v == "":
            return "sha256"
        if not isinstance(v, str) or not ALGORITHM_NAME_PATTERN.fullmatch(v):
            raise ValueError(f"invalid algorithm name: {v!r}")
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
