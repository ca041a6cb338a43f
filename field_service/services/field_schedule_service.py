"""Field schedule generation, conflict checks and booking lifecycle."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Sequence
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from sqlalchemy.ext.asyncio import AsyncSession

from field_service.core.config import get_settings
from field_service.core.exceptions import (
    DomainException,
    NotFoundException,
    ScheduleAlreadyExistsException,
    ValidationException,
)
from field_service.core.formatting import (
    format_currency,
    format_month_label,
    format_time_window,
    parse_date,
)
from field_service.models import Field, FieldSchedule, FieldScheduleStatus, TimeSlot
from field_service.repositories import RepositoryRegistry
from field_service.schemas.field_schedule import (
    FieldScheduleForBookingRead,
    FieldScheduleRead,
)
from field_service.schemas.pagination import PaginationResult

logger = logging.getLogger(__name__)


def _tomorrow(today: datetime.date | None = None) -> datetime.date:
    if today is None:
        today = datetime.datetime.now(ZoneInfo(get_settings().app_timezone)).date()
    return today + datetime.timedelta(days=1)


def _conflict(field: Field, date: datetime.date, time_slot: TimeSlot) -> ScheduleAlreadyExistsException:
    logger.warning(
        "Schedule already exists for field %s on %s at %s",
        field.uuid,
        date.isoformat(),
        time_slot.uuid,
    )
    return ScheduleAlreadyExistsException(
        details={
            "field_id": str(field.uuid),
            "date": date.isoformat(),
            "time_id": str(time_slot.uuid),
        }
    )


async def find_conflict(
    session: AsyncSession,
    *,
    field_id: int,
    date: datetime.date,
    time_id: int,
) -> FieldSchedule | None:
    """Return the schedule already occupying (field, date, slot), if any."""
    return await RepositoryRegistry(session).field_schedules.find_by_field_date_and_slot(
        field_id=field_id, date=date, time_id=time_id
    )


async def list_field_schedules(
    session: AsyncSession,
    *,
    page: int = 1,
    limit: int | None = None,
    sort_column: str | None = None,
    sort_order: str | None = None,
) -> PaginationResult[FieldScheduleRead]:
    limit = limit or get_settings().default_page_limit
    if page < 1 or limit < 1:
        raise ValidationException("page and limit must be positive")
    schedules, total = await RepositoryRegistry(session).field_schedules.find_all_with_pagination(
        page=page,
        limit=limit,
        sort_column=sort_column,
        sort_order=sort_order,
    )
    return PaginationResult[FieldScheduleRead].build(
        count=total,
        page=page,
        limit=limit,
        data=[FieldScheduleRead.from_model(schedule) for schedule in schedules],
    )


async def list_field_schedules_for_booking(
    session: AsyncSession,
    *,
    field_id: UUID,
    date: str,
    locale: str | None = None,
    currency: str | None = None,
) -> list[FieldScheduleForBookingRead]:
    """Return every schedule of one field on one day, formatted for display."""
    settings = get_settings()
    locale = locale or settings.display_locale
    currency = currency or settings.display_currency

    target_date = parse_date(date)
    repositories = RepositoryRegistry(session)
    field = await repositories.fields.find_by_uuid(field_id)
    schedules = await repositories.field_schedules.find_all_by_field_and_date(
        field_id=field.id, date=target_date
    )
    return [
        FieldScheduleForBookingRead(
            uuid=schedule.uuid,
            time=format_time_window(schedule.time_slot.start_time, schedule.time_slot.end_time),
            date=format_month_label(schedule.date, locale),
            status=schedule.status,
            price_per_hour=format_currency(field.price_per_hour, currency),
        )
        for schedule in schedules
    ]


async def get_field_schedule(session: AsyncSession, *, schedule_id: UUID) -> FieldSchedule:
    return await RepositoryRegistry(session).field_schedules.find_by_uuid(schedule_id)


async def generate_schedule_for_one_month(
    session: AsyncSession,
    *,
    field_id: UUID,
    today: datetime.date | None = None,
) -> list[FieldSchedule]:
    """Open every catalog slot of a field for the days starting tomorrow.

    The whole window is checked slot by slot before anything is written; the
    first occupied (date, slot) aborts the run with
    ``ScheduleAlreadyExistsException``. The candidates are then inserted in a
    single transaction, so a concurrent writer that slips in between the
    checks and the insert also fails the whole batch through the unique
    constraint.
    """
    repositories = RepositoryRegistry(session)
    field = await repositories.fields.find_by_uuid(field_id)
    time_slots = await repositories.times.find_all()

    number_of_days = get_settings().schedule_days_ahead
    start = _tomorrow(today)
    schedules: list[FieldSchedule] = []
    for offset in range(number_of_days):
        current_date = start + datetime.timedelta(days=offset)
        for time_slot in time_slots:
            existing = await repositories.field_schedules.find_by_field_date_and_slot(
                field_id=field.id, date=current_date, time_id=time_slot.id
            )
            if existing is not None:
                raise _conflict(field, current_date, time_slot)
            schedules.append(
                FieldSchedule(
                    uuid=uuid4(),
                    field_id=field.id,
                    time_id=time_slot.id,
                    date=current_date,
                    status=FieldScheduleStatus.AVAILABLE,
                    field=field,
                    time_slot=time_slot,
                )
            )

    if schedules:
        await repositories.field_schedules.create_batch(schedules)
    logger.info(
        "Generated %d schedules for field %s from %s",
        len(schedules),
        field.uuid,
        start.isoformat(),
    )
    return schedules


async def create_field_schedules(
    session: AsyncSession,
    *,
    field_id: UUID,
    date: str,
    time_ids: Sequence[UUID],
) -> list[FieldSchedule]:
    """Open a caller-chosen set of slots for one field on one date."""
    if not time_ids:
        raise ValidationException("At least one time slot must be provided")
    if len(set(time_ids)) != len(time_ids):
        raise ValidationException("Time slots must not repeat")
    target_date = parse_date(date)

    repositories = RepositoryRegistry(session)
    field = await repositories.fields.find_by_uuid(field_id)
    schedules: list[FieldSchedule] = []
    for time_id in time_ids:
        time_slot = await repositories.times.find_by_uuid(time_id)
        existing = await repositories.field_schedules.find_by_field_date_and_slot(
            field_id=field.id, date=target_date, time_id=time_slot.id
        )
        if existing is not None:
            raise _conflict(field, target_date, time_slot)
        schedules.append(
            FieldSchedule(
                uuid=uuid4(),
                field_id=field.id,
                time_id=time_slot.id,
                date=target_date,
                status=FieldScheduleStatus.AVAILABLE,
                field=field,
                time_slot=time_slot,
            )
        )

    await repositories.field_schedules.create_batch(schedules)
    logger.info(
        "Created %d schedules for field %s on %s",
        len(schedules),
        field.uuid,
        target_date.isoformat(),
    )
    return schedules


async def update_field_schedule(
    session: AsyncSession,
    *,
    schedule_id: UUID,
    date: str,
    time_id: UUID,
) -> FieldSchedule:
    """Rebind a schedule to another date and/or slot; status is kept."""
    target_date = parse_date(date)
    repositories = RepositoryRegistry(session)
    schedule = await repositories.field_schedules.find_by_uuid(schedule_id)
    time_slot = await repositories.times.find_by_uuid(time_id)

    existing = await repositories.field_schedules.find_by_field_date_and_slot(
        field_id=schedule.field_id, date=target_date, time_id=time_slot.id
    )
    if existing is not None and existing.id != schedule.id:
        raise _conflict(schedule.field, target_date, time_slot)

    return await repositories.field_schedules.update_fields(
        schedule_id, date=target_date, time_slot=time_slot
    )


async def update_field_schedule_status(
    session: AsyncSession,
    *,
    schedule_ids: Sequence[UUID],
) -> list[UUID]:
    """Mark each schedule as booked, one committed update at a time.

    Updates are not rolled back when a later identity fails: the raised
    exception names the failing identity under ``details["uuid"]`` and lists
    the identities booked so far under ``details["booked"]`` so the caller
    can reconcile.
    """
    if not schedule_ids:
        raise ValidationException("At least one field schedule must be provided")

    repository = RepositoryRegistry(session).field_schedules
    booked: list[UUID] = []
    for schedule_id in schedule_ids:
        try:
            await repository.update_status(FieldScheduleStatus.BOOKED, schedule_id)
        except DomainException as exc:
            exc.details.setdefault("uuid", str(schedule_id))
            exc.details["booked"] = [str(item) for item in booked]
            raise
        booked.append(schedule_id)
    logger.info("Booked %d field schedules", len(booked))
    return booked


async def delete_field_schedule(session: AsyncSession, *, schedule_id: UUID) -> None:
    await RepositoryRegistry(session).field_schedules.delete(schedule_id)
