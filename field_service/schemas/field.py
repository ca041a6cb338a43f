"""Pydantic schemas for fields."""
from __future__ import annotations

from uuid import UUID
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FieldBase(BaseModel):
    """Shared field attributes."""

    code: str = Field(min_length=1, max_length=15)
    name: str = Field(min_length=1, max_length=100)
    price_per_hour: int = Field(ge=0)
    images: list[str] = Field(default_factory=list)


class FieldCreate(FieldBase):
    """Payload for creating fields."""


class FieldUpdate(BaseModel):
    """Mutable field attributes."""

    code: str | None = Field(default=None, min_length=1, max_length=15)
    name: str | None = Field(default=None, min_length=1, max_length=100)
    price_per_hour: int | None = Field(default=None, ge=0)
    images: list[str] | None = None


class FieldRead(FieldBase):
    """Serialized field representation."""

    uuid: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
