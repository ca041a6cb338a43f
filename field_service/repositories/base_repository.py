"""
Base repository for async data access.

Repositories own every SQL statement the services issue. They translate
storage failures into domain exceptions so services only ever see
``NotFoundException``, ``ScheduleAlreadyExistsException`` or
``RepositoryException``. Each call runs under the configured repository
timeout so a stalled database fails fast instead of blocking the request.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, Executable, Result, Select, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from field_service.core.config import get_settings
from field_service.core.exceptions import (
    DomainException,
    NotFoundException,
    RepositoryException,
    ValidationException,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

SORT_ORDERS = frozenset({"asc", "desc"})


class BaseRepository(Generic[T]):
    """Shared execution, commit and error translation for repositories."""

    model: type[T]
    not_found_message = "Record not found"
    sortable_columns: frozenset[str] = frozenset({"id", "created_at", "updated_at"})

    def __init__(self, session: AsyncSession, *, timeout: float | None = None) -> None:
        self.session = session
        self.timeout = (
            timeout if timeout is not None else get_settings().repository_timeout_seconds
        )

    async def _execute(self, statement: Executable) -> Result[Any]:
        try:
            async with asyncio.timeout(self.timeout):
                return await self.session.execute(statement)
        except TimeoutError as exc:
            logger.error("Repository query timed out after %ss", self.timeout)
            raise RepositoryException("Database query timed out") from exc
        except SQLAlchemyError as exc:
            logger.exception("Repository query failed")
            raise RepositoryException("Database query failed") from exc

    async def _commit(
        self,
        *,
        on_integrity_error: Callable[[IntegrityError], DomainException | None] | None = None,
    ) -> None:
        """Commit the pending unit of work, rolling back on any failure.

        ``on_integrity_error`` maps the violations a repository expects to a
        domain exception; anything it returns ``None`` for is a persistence
        failure.
        """
        try:
            async with asyncio.timeout(self.timeout):
                await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            mapped = on_integrity_error(exc) if on_integrity_error is not None else None
            if mapped is not None:
                raise mapped from exc
            logger.exception("Integrity error during commit")
            raise RepositoryException("Database constraint violated") from exc
        except TimeoutError as exc:
            await self.session.rollback()
            logger.error("Repository commit timed out after %ss", self.timeout)
            raise RepositoryException("Database write timed out") from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.exception("Repository commit failed")
            raise RepositoryException("Database write failed") from exc

    @staticmethod
    def _page_offset(page: int, limit: int) -> int:
        return (page - 1) * limit

    async def find_by_uuid(self, uuid: UUID) -> T:
        stmt = select(self.model).where(self.model.uuid == uuid)  # type: ignore[attr-defined]
        result = await self._execute(self._with_options(stmt))
        record = result.scalars().unique().one_or_none()
        if record is None:
            raise NotFoundException(self.not_found_message, details={"uuid": str(uuid)})
        return record

    def _with_options(self, stmt: Select[Any]) -> Select[Any]:
        """Hook for subclasses that need eager loading."""
        return stmt

    def _sort_clause(self, sort_column: str | None, sort_order: str | None) -> ColumnElement[Any]:
        column_name = sort_column or "created_at"
        order = (sort_order or "desc").lower()
        if column_name not in self.sortable_columns:
            raise ValidationException(
                f"Cannot sort by '{column_name}'",
                details={"allowed": sorted(self.sortable_columns)},
            )
        if order not in SORT_ORDERS:
            raise ValidationException(
                f"Invalid sort order '{sort_order}'",
                details={"allowed": sorted(SORT_ORDERS)},
            )
        column = getattr(self.model, column_name)
        return column.asc() if order == "asc" else column.desc()


def violates_constraint(exc: IntegrityError, *markers: str) -> bool:
    """Whether the driver error names one of ``markers``.

    PostgreSQL reports the constraint name; SQLite reports the table and
    columns, so callers pass both forms.
    """
    message = str(exc.orig)
    return any(marker in message for marker in markers)
