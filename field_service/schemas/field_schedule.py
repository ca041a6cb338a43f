"""Pydantic schemas for field schedules."""
from __future__ import annotations

import datetime
from uuid import UUID

from pydantic import BaseModel

from field_service.core.formatting import format_time_window
from field_service.models.field_schedule import FieldSchedule, FieldScheduleStatus


class FieldScheduleCreate(BaseModel):
    """Open the given time slots of a field on one date."""

    field_id: UUID
    date: str
    time_ids: list[UUID]


class GenerateFieldScheduleForOneMonthRequest(BaseModel):
    """Generate the next month of schedules for a field."""

    field_id: UUID


class FieldScheduleUpdate(BaseModel):
    """Move a schedule to another date and/or time slot."""

    date: str
    time_id: UUID


class FieldScheduleStatusUpdate(BaseModel):
    """Mark the listed schedules as booked."""

    field_schedule_ids: list[UUID]


class FieldScheduleRead(BaseModel):
    """Serialized field schedule."""

    uuid: UUID
    field_name: str
    price_per_hour: int
    date: datetime.date
    status: FieldScheduleStatus
    time: str
    created_at: datetime.datetime
    updated_at: datetime.datetime

    @classmethod
    def from_model(cls, schedule: FieldSchedule) -> "FieldScheduleRead":
        return cls(
            uuid=schedule.uuid,
            field_name=schedule.field.name,
            price_per_hour=schedule.field.price_per_hour,
            date=schedule.date,
            status=schedule.status,
            time=format_time_window(schedule.time_slot.start_time, schedule.time_slot.end_time),
            created_at=schedule.created_at,
            updated_at=schedule.updated_at,
        )


class FieldScheduleForBookingRead(BaseModel):
    """Schedule as shown in the booking screen for one field and day."""

    uuid: UUID
    time: str
    date: str
    status: FieldScheduleStatus
    price_per_hour: str


class FieldScheduleBatchResult(BaseModel):
    """Summary of a batch creation."""

    created: int
    field_schedule_ids: list[UUID]
