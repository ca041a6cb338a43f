"""Reusable daily time window model."""
from __future__ import annotations

from datetime import time

from sqlalchemy import Time
from sqlalchemy.orm import Mapped, mapped_column

from field_service.db.base import Base
from field_service.models.mixins import IdentityMixin, TimestampMixin


class TimeSlot(IdentityMixin, TimestampMixin, Base):
    """Wall-clock window shared by every field and date."""

    __tablename__ = "times"

    start_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    end_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
