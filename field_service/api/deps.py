"""Common API dependencies."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, Request, Response
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter
from sqlalchemy.ext.asyncio import AsyncSession

from field_service.core.config import get_settings
from field_service.db.session import get_session

logger = logging.getLogger(__name__)

_WINDOW_SECONDS = {
    "second": 1,
    "seconds": 1,
    "minute": 60,
    "minutes": 60,
    "hour": 3600,
    "hours": 3600,
    "day": 86400,
    "days": 86400,
}


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async for session in get_session():
        yield session


def parse_rate(value: str, *, fallback: tuple[int, int]) -> tuple[int, int]:
    """Turn ``"100/minute"`` into ``(100, 60)``; malformed values use ``fallback``."""
    try:
        count_str, window_str = value.split("/", 1)
        count = int(count_str.strip())
    except ValueError:
        logger.warning("Invalid rate limit %r; using %s", value, fallback)
        return fallback
    seconds = _WINDOW_SECONDS.get(window_str.strip().lower(), fallback[1])
    return count, seconds


def rate_limit(limit: tuple[int, int]):
    """Rate limit a route when Redis is available; no-op otherwise."""

    async def _dependency(request: Request, response: Response) -> None:
        if FastAPILimiter.redis is None:
            return None
        limiter = RateLimiter(times=limit[0], seconds=limit[1])
        await limiter(request, response)

    return Depends(_dependency)


DEFAULT_RATE_LIMIT = rate_limit(
    parse_rate(get_settings().rate_limit_default, fallback=(100, 60))
)
