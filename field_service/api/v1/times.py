"""Time slot catalog API."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from field_service.api import deps
from field_service.schemas.time_slot import TimeSlotCreate, TimeSlotRead
from field_service.services import time_slot_service

router = APIRouter()


@router.get("", response_model=list[TimeSlotRead], summary="List time slots")
async def list_time_slots(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[TimeSlotRead]:
    time_slots = await time_slot_service.list_time_slots(session)
    return [TimeSlotRead.model_validate(obj) for obj in time_slots]


@router.get("/{time_id}", response_model=TimeSlotRead, summary="Get time slot")
async def get_time_slot(
    time_id: UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> TimeSlotRead:
    time_slot = await time_slot_service.get_time_slot(session, time_id=time_id)
    return TimeSlotRead.model_validate(time_slot)


@router.post(
    "",
    response_model=TimeSlotRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create time slot",
    dependencies=[deps.DEFAULT_RATE_LIMIT],
)
async def create_time_slot(
    payload: TimeSlotCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> TimeSlotRead:
    time_slot = await time_slot_service.create_time_slot(session, payload=payload)
    return TimeSlotRead.model_validate(time_slot)
