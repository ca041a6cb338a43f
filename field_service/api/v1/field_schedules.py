"""Field schedule API: generation, manual creation, booking and queries."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from field_service.api import deps
from field_service.schemas.field_schedule import (
    FieldScheduleBatchResult,
    FieldScheduleCreate,
    FieldScheduleForBookingRead,
    FieldScheduleRead,
    FieldScheduleStatusUpdate,
    FieldScheduleUpdate,
    GenerateFieldScheduleForOneMonthRequest,
)
from field_service.schemas.pagination import PaginationResult
from field_service.services import field_schedule_service

router = APIRouter()


@router.get(
    "",
    response_model=PaginationResult[FieldScheduleRead],
    summary="List field schedules",
)
async def list_field_schedules(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
    sort_column: str | None = None,
    sort_order: str | None = None,
) -> PaginationResult[FieldScheduleRead]:
    return await field_schedule_service.list_field_schedules(
        session,
        page=page,
        limit=limit,
        sort_column=sort_column,
        sort_order=sort_order,
    )


@router.get(
    "/lists/{field_id}",
    response_model=list[FieldScheduleForBookingRead],
    summary="List a field's schedules for one date",
)
async def list_field_schedules_for_booking(
    field_id: UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    date: Annotated[str, Query(description="Date in YYYY-MM-DD format")],
) -> list[FieldScheduleForBookingRead]:
    return await field_schedule_service.list_field_schedules_for_booking(
        session, field_id=field_id, date=date
    )


@router.get("/{schedule_id}", response_model=FieldScheduleRead, summary="Get field schedule")
async def get_field_schedule(
    schedule_id: UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> FieldScheduleRead:
    schedule = await field_schedule_service.get_field_schedule(session, schedule_id=schedule_id)
    return FieldScheduleRead.from_model(schedule)


@router.post(
    "",
    response_model=FieldScheduleBatchResult,
    status_code=status.HTTP_201_CREATED,
    summary="Open time slots of a field for one date",
    dependencies=[deps.DEFAULT_RATE_LIMIT],
)
async def create_field_schedules(
    payload: FieldScheduleCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> FieldScheduleBatchResult:
    schedules = await field_schedule_service.create_field_schedules(
        session,
        field_id=payload.field_id,
        date=payload.date,
        time_ids=payload.time_ids,
    )
    return FieldScheduleBatchResult(
        created=len(schedules),
        field_schedule_ids=[schedule.uuid for schedule in schedules],
    )


@router.post(
    "/one-month",
    response_model=FieldScheduleBatchResult,
    status_code=status.HTTP_201_CREATED,
    summary="Generate one month of schedules for a field",
    dependencies=[deps.DEFAULT_RATE_LIMIT],
)
async def generate_schedule_for_one_month(
    payload: GenerateFieldScheduleForOneMonthRequest,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> FieldScheduleBatchResult:
    schedules = await field_schedule_service.generate_schedule_for_one_month(
        session, field_id=payload.field_id
    )
    return FieldScheduleBatchResult(
        created=len(schedules),
        field_schedule_ids=[schedule.uuid for schedule in schedules],
    )


@router.patch(
    "/status",
    response_model=list[UUID],
    summary="Mark field schedules as booked",
    dependencies=[deps.DEFAULT_RATE_LIMIT],
)
async def update_field_schedule_status(
    payload: FieldScheduleStatusUpdate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[UUID]:
    return await field_schedule_service.update_field_schedule_status(
        session, schedule_ids=payload.field_schedule_ids
    )


@router.put(
    "/{schedule_id}",
    response_model=FieldScheduleRead,
    summary="Move a field schedule",
    dependencies=[deps.DEFAULT_RATE_LIMIT],
)
async def update_field_schedule(
    schedule_id: UUID,
    payload: FieldScheduleUpdate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> FieldScheduleRead:
    schedule = await field_schedule_service.update_field_schedule(
        session,
        schedule_id=schedule_id,
        date=payload.date,
        time_id=payload.time_id,
    )
    return FieldScheduleRead.from_model(schedule)


@router.delete(
    "/{schedule_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete field schedule",
    dependencies=[deps.DEFAULT_RATE_LIMIT],
)
async def delete_field_schedule(
    schedule_id: UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> Response:
    await field_schedule_service.delete_field_schedule(session, schedule_id=schedule_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
