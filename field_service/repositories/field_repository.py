"""Data access for fields."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from field_service.core.exceptions import ConflictException
from field_service.models.field import Field
from field_service.models.field_schedule import FieldSchedule
from field_service.repositories.base_repository import BaseRepository, violates_constraint

CODE_UNIQUE_MARKERS = ("uq_fields_code", "fields_code_key", "fields.code")


class FieldRepository(BaseRepository[Field]):
    model = Field
    not_found_message = "Field not found"
    sortable_columns = frozenset(
        {"id", "code", "name", "price_per_hour", "created_at", "updated_at"}
    )

    async def find_all_with_pagination(
        self,
        *,
        page: int,
        limit: int,
        sort_column: str | None = None,
        sort_order: str | None = None,
    ) -> tuple[Sequence[Field], int]:
        stmt = (
            select(Field)
            .order_by(self._sort_clause(sort_column, sort_order), Field.id)
            .offset(self._page_offset(page, limit))
            .limit(limit)
        )
        fields = (await self._execute(stmt)).scalars().all()
        total = (await self._execute(select(func.count(Field.id)))).scalar_one()
        return fields, total

    async def find_all(self) -> Sequence[Field]:
        result = await self._execute(select(Field).order_by(Field.name))
        return result.scalars().all()

    async def create(self, field: Field) -> Field:
        self.session.add(field)
        await self._commit(on_integrity_error=_duplicate_code)
        return field

    async def update(self, uuid: UUID, values: dict[str, Any]) -> Field:
        field = await self.find_by_uuid(uuid)
        for key, value in values.items():
            setattr(field, key, value)
        await self._commit(on_integrity_error=_duplicate_code)
        return field

    async def delete(self, uuid: UUID) -> None:
        """Delete a field together with its schedules in one transaction."""
        field = await self.find_by_uuid(uuid)
        await self._execute(delete(FieldSchedule).where(FieldSchedule.field_id == field.id))
        await self._execute(delete(Field).where(Field.id == field.id))
        await self._commit()


def _duplicate_code(exc: IntegrityError) -> ConflictException | None:
    if violates_constraint(exc, *CODE_UNIQUE_MARKERS):
        return ConflictException("Field code already exists", code="FIELD_CODE_EXISTS")
    return None
