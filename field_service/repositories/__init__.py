"""Repository layer: every SQL statement the services issue lives here."""

from sqlalchemy.ext.asyncio import AsyncSession

from field_service.repositories.field_repository import FieldRepository
from field_service.repositories.field_schedule_repository import FieldScheduleRepository
from field_service.repositories.time_slot_repository import TimeSlotRepository


class RepositoryRegistry:
    """Bundle of repositories bound to one session (one request)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.fields = FieldRepository(session)
        self.times = TimeSlotRepository(session)
        self.field_schedules = FieldScheduleRepository(session)


__all__ = [
    "FieldRepository",
    "FieldScheduleRepository",
    "RepositoryRegistry",
    "TimeSlotRepository",
]
