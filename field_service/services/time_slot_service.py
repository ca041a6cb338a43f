"""Time slot catalog services."""
from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from field_service.core.exceptions import ValidationException
from field_service.models.time_slot import TimeSlot
from field_service.repositories import RepositoryRegistry
from field_service.schemas.time_slot import TimeSlotCreate


async def list_time_slots(session: AsyncSession) -> Sequence[TimeSlot]:
    """Return the whole catalog ordered by start time."""
    return await RepositoryRegistry(session).times.find_all()


async def get_time_slot(session: AsyncSession, *, time_id: UUID) -> TimeSlot:
    return await RepositoryRegistry(session).times.find_by_uuid(time_id)


async def create_time_slot(session: AsyncSession, *, payload: TimeSlotCreate) -> TimeSlot:
    if payload.end_time <= payload.start_time:
        raise ValidationException("Time slot end must be after its start")
    time_slot = TimeSlot(start_time=payload.start_time, end_time=payload.end_time)
    return await RepositoryRegistry(session).times.create(time_slot)
