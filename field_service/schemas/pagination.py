"""Shared pagination envelope."""
from __future__ import annotations

import math
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PaginationResult(BaseModel, Generic[T]):
    """One page of results plus navigation metadata."""

    count: int
    total_page: int
    current_page: int
    next_page: int | None = None
    previous_page: int | None = None
    limit: int
    data: list[T]

    @classmethod
    def build(cls, *, count: int, page: int, limit: int, data: list[T]) -> "PaginationResult[T]":
        total_page = math.ceil(count / limit) if limit else 0
        return cls(
            count=count,
            total_page=total_page,
            current_page=page,
            next_page=page + 1 if page < total_page else None,
            previous_page=page - 1 if page > 1 else None,
            limit=limit,
            data=data,
        )
