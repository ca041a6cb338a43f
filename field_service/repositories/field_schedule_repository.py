"""Data access for field schedules, including the conflict lookup."""

from __future__ import annotations

import datetime
from collections.abc import Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from field_service.core.exceptions import ScheduleAlreadyExistsException
from field_service.models.field_schedule import FieldSchedule, FieldScheduleStatus
from field_service.models.time_slot import TimeSlot
from field_service.repositories.base_repository import BaseRepository, violates_constraint

SLOT_UNIQUE_MARKERS = (
    "uq_field_schedules_field_date_time",
    "field_schedules.field_id, field_schedules.date, field_schedules.time_id",
)


class FieldScheduleRepository(BaseRepository[FieldSchedule]):
    model = FieldSchedule
    not_found_message = "Field schedule not found"
    sortable_columns = frozenset({"id", "date", "status", "created_at", "updated_at"})

    def _with_options(self, stmt: Select[Any]) -> Select[Any]:
        return stmt.options(
            selectinload(FieldSchedule.field),
            selectinload(FieldSchedule.time_slot),
        )

    async def find_by_field_date_and_slot(
        self,
        *,
        field_id: int,
        date: datetime.date,
        time_id: int,
    ) -> FieldSchedule | None:
        """Return the schedule occupying (field, date, slot), if any."""
        stmt = select(FieldSchedule).where(
            FieldSchedule.field_id == field_id,
            FieldSchedule.date == date,
            FieldSchedule.time_id == time_id,
        )
        result = await self._execute(stmt)
        return result.scalars().first()

    async def find_all_with_pagination(
        self,
        *,
        page: int,
        limit: int,
        sort_column: str | None = None,
        sort_order: str | None = None,
    ) -> tuple[Sequence[FieldSchedule], int]:
        stmt = self._with_options(
            select(FieldSchedule)
            .order_by(self._sort_clause(sort_column, sort_order), FieldSchedule.id)
            .offset(self._page_offset(page, limit))
            .limit(limit)
        )
        schedules = (await self._execute(stmt)).scalars().unique().all()
        total = (await self._execute(select(func.count(FieldSchedule.id)))).scalar_one()
        return schedules, total

    async def find_all_by_field_and_date(
        self,
        *,
        field_id: int,
        date: datetime.date,
    ) -> Sequence[FieldSchedule]:
        stmt = self._with_options(
            select(FieldSchedule)
            .join(TimeSlot, FieldSchedule.time_id == TimeSlot.id)
            .where(FieldSchedule.field_id == field_id, FieldSchedule.date == date)
            .order_by(TimeSlot.start_time, FieldSchedule.id)
        )
        return (await self._execute(stmt)).scalars().unique().all()

    async def create_batch(self, schedules: Sequence[FieldSchedule]) -> None:
        """Insert every schedule in one transaction, or none of them."""
        self.session.add_all(schedules)
        await self._commit(on_integrity_error=_slot_taken)

    async def update_fields(
        self,
        uuid: UUID,
        *,
        date: datetime.date,
        time_slot: TimeSlot,
    ) -> FieldSchedule:
        schedule = await self.find_by_uuid(uuid)
        schedule.date = date
        schedule.time_id = time_slot.id
        schedule.time_slot = time_slot
        await self._commit(on_integrity_error=_slot_taken)
        return schedule

    async def update_status(self, status: FieldScheduleStatus, uuid: UUID) -> FieldSchedule:
        schedule = await self.find_by_uuid(uuid)
        schedule.status = status
        await self._commit()
        return schedule

    async def delete(self, uuid: UUID) -> None:
        schedule = await self.find_by_uuid(uuid)
        await self.session.delete(schedule)
        await self._commit()


def _slot_taken(exc: IntegrityError) -> ScheduleAlreadyExistsException | None:
    if violates_constraint(exc, *SLOT_UNIQUE_MARKERS):
        return ScheduleAlreadyExistsException()
    return None
