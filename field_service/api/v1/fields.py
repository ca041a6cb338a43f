"""Field catalog API."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from field_service.api import deps
from field_service.schemas.field import FieldCreate, FieldRead, FieldUpdate
from field_service.schemas.pagination import PaginationResult
from field_service.services import field_catalog_service

router = APIRouter()


@router.get("", response_model=PaginationResult[FieldRead], summary="List fields")
async def list_fields(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
    sort_column: str | None = None,
    sort_order: str | None = None,
) -> PaginationResult[FieldRead]:
    return await field_catalog_service.list_fields(
        session,
        page=page,
        limit=limit,
        sort_column=sort_column,
        sort_order=sort_order,
    )


@router.get("/all", response_model=list[FieldRead], summary="List every field")
async def list_all_fields(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[FieldRead]:
    fields = await field_catalog_service.list_all_fields(session)
    return [FieldRead.model_validate(obj) for obj in fields]


@router.get("/{field_id}", response_model=FieldRead, summary="Get field")
async def get_field(
    field_id: UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> FieldRead:
    field = await field_catalog_service.get_field(session, field_id=field_id)
    return FieldRead.model_validate(field)


@router.post(
    "",
    response_model=FieldRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create field",
    dependencies=[deps.DEFAULT_RATE_LIMIT],
)
async def create_field(
    payload: FieldCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> FieldRead:
    field = await field_catalog_service.create_field(session, payload=payload)
    return FieldRead.model_validate(field)


@router.put(
    "/{field_id}",
    response_model=FieldRead,
    summary="Update field",
    dependencies=[deps.DEFAULT_RATE_LIMIT],
)
async def update_field(
    field_id: UUID,
    payload: FieldUpdate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> FieldRead:
    field = await field_catalog_service.update_field(
        session, field_id=field_id, payload=payload
    )
    return FieldRead.model_validate(field)


@router.delete(
    "/{field_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete field",
    dependencies=[deps.DEFAULT_RATE_LIMIT],
)
async def delete_field(
    field_id: UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> Response:
    await field_catalog_service.delete_field(session, field_id=field_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
