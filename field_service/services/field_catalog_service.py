"""Field catalog services."""
from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from field_service.core.config import get_settings
from field_service.core.exceptions import ValidationException
from field_service.models.field import Field
from field_service.repositories import RepositoryRegistry
from field_service.schemas.field import FieldCreate, FieldRead, FieldUpdate
from field_service.schemas.pagination import PaginationResult


async def list_fields(
    session: AsyncSession,
    *,
    page: int = 1,
    limit: int | None = None,
    sort_column: str | None = None,
    sort_order: str | None = None,
) -> PaginationResult[FieldRead]:
    limit = limit or get_settings().default_page_limit
    if page < 1 or limit < 1:
        raise ValidationException("page and limit must be positive")
    fields, total = await RepositoryRegistry(session).fields.find_all_with_pagination(
        page=page,
        limit=limit,
        sort_column=sort_column,
        sort_order=sort_order,
    )
    return PaginationResult[FieldRead].build(
        count=total,
        page=page,
        limit=limit,
        data=[FieldRead.model_validate(field) for field in fields],
    )


async def list_all_fields(session: AsyncSession) -> Sequence[Field]:
    return await RepositoryRegistry(session).fields.find_all()


async def get_field(session: AsyncSession, *, field_id: UUID) -> Field:
    return await RepositoryRegistry(session).fields.find_by_uuid(field_id)


async def create_field(session: AsyncSession, *, payload: FieldCreate) -> Field:
    field = Field(**payload.model_dump())
    return await RepositoryRegistry(session).fields.create(field)


async def update_field(
    session: AsyncSession,
    *,
    field_id: UUID,
    payload: FieldUpdate,
) -> Field:
    values = payload.model_dump(exclude_unset=True, exclude_none=True)
    return await RepositoryRegistry(session).fields.update(field_id, values)


async def delete_field(session: AsyncSession, *, field_id: UUID) -> None:
    """Remove a field along with its schedules."""
    await RepositoryRegistry(session).fields.delete(field_id)
