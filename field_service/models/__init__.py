"""ORM models package export."""

from field_service.models.field import Field
from field_service.models.field_schedule import FieldSchedule, FieldScheduleStatus
from field_service.models.time_slot import TimeSlot

__all__ = [
    "Field",
    "FieldSchedule",
    "FieldScheduleStatus",
    "TimeSlot",
]
