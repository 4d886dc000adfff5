"""
Base Pydantic models for contentdigest.

Config sections and discovery records share one validation policy: unknown
fields are rejected and assignments are revalidated.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DigestBaseModel(BaseModel):
    """Strict base model: no implicit coercion, no unknown fields."""

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
    )


class ImmutableModel(DigestBaseModel):
    """Frozen variant for records handed out by the registry."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
    )
