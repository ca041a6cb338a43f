"""Pydantic schemas for the time slot catalog."""
from __future__ import annotations

from uuid import UUID
from datetime import datetime, time

from pydantic import BaseModel, ConfigDict


class TimeSlotCreate(BaseModel):
    """Payload for creating a time slot."""

    start_time: time
    end_time: time


class TimeSlotRead(BaseModel):
    """Serialized time slot."""

    uuid: UUID
    start_time: time
    end_time: time
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
