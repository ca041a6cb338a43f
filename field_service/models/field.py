"""Reservable facility model."""
from __future__ import annotations

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from field_service.db.base import Base
from field_service.models.mixins import IdentityMixin, TimestampMixin


class Field(IdentityMixin, TimestampMixin, Base):
    """A physical facility that can be booked per time slot."""

    __tablename__ = "fields"

    code: Mapped[str] = mapped_column(String(15), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price_per_hour: Mapped[int] = mapped_column(nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
