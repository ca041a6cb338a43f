"""Versioned API router."""

from fastapi import APIRouter

from . import field_schedules, fields, health, times

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(times.router, prefix="/times", tags=["times"])
router.include_router(fields.router, prefix="/fields", tags=["fields"])
router.include_router(
    field_schedules.router, prefix="/field-schedules", tags=["field-schedules"]
)
