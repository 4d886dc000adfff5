"""Pydantic models for contentdigest."""

from .algorithm import AlgorithmInfo
from .base import DigestBaseModel, ImmutableModel
from .config import DigestConfig, LoggingConfig

__all__ = [
    "AlgorithmInfo",
    "DigestBaseModel",
    "DigestConfig",
    "ImmutableModel",
    "LoggingConfig",
]
