"""Bookable field schedule model."""
from __future__ import annotations

import enum
import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from field_service.db.base import Base
from field_service.models.mixins import IdentityMixin, TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from field_service.models.field import Field
    from field_service.models.time_slot import TimeSlot


class FieldScheduleStatus(str, enum.Enum):
    """Lifecycle states for a field schedule."""

    AVAILABLE = "available"
    BOOKED = "booked"


class FieldSchedule(IdentityMixin, TimestampMixin, Base):
    """One bookable instance of a field on a date and time slot."""

    __tablename__ = "field_schedules"
    __table_args__ = (
        UniqueConstraint(
            "field_id", "date", "time_id", name="uq_field_schedules_field_date_time"
        ),
    )

    field_id: Mapped[int] = mapped_column(
        ForeignKey("fields.id", ondelete="CASCADE"), nullable=False, index=True
    )
    time_id: Mapped[int] = mapped_column(
        ForeignKey("times.id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    status: Mapped[FieldScheduleStatus] = mapped_column(
        Enum(FieldScheduleStatus),
        default=FieldScheduleStatus.AVAILABLE,
        nullable=False,
    )

    field: Mapped["Field"] = relationship("Field")
    time_slot: Mapped["TimeSlot"] = relationship("TimeSlot")
