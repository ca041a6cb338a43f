"""Data access for the time slot catalog."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select

from field_service.models.time_slot import TimeSlot
from field_service.repositories.base_repository import BaseRepository


class TimeSlotRepository(BaseRepository[TimeSlot]):
    model = TimeSlot
    not_found_message = "Time slot not found"

    async def find_all(self) -> Sequence[TimeSlot]:
        stmt = select(TimeSlot).order_by(TimeSlot.start_time, TimeSlot.id)
        return (await self._execute(stmt)).scalars().all()

    async def create(self, time_slot: TimeSlot) -> TimeSlot:
        self.session.add(time_slot)
        await self._commit()
        return time_slot
