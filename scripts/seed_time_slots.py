"""Seed the default hourly time slot catalog."""
from __future__ import annotations

import argparse
import asyncio
from datetime import time

from sqlalchemy import select

from field_service.db.session import get_sessionmaker
from field_service.models.time_slot import TimeSlot

DEFAULT_FIRST_HOUR = 8
DEFAULT_LAST_HOUR = 22


async def seed_time_slots(
    first_hour: int = DEFAULT_FIRST_HOUR, last_hour: int = DEFAULT_LAST_HOUR
) -> int:
    sessionmaker = get_sessionmaker()
    async with sessionmaker() as session:
        existing = {
            (slot.start_time, slot.end_time)
            for slot in (await session.execute(select(TimeSlot))).scalars()
        }
        created = 0
        for hour in range(first_hour, last_hour):
            window = (time(hour, 0), time(hour + 1, 0))
            if window not in existing:
                session.add(TimeSlot(start_time=window[0], end_time=window[1]))
                created += 1
        if created:
            await session.commit()
        print(f"Seeded {created} time slot(s).")
        return created


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--first-hour", type=int, default=DEFAULT_FIRST_HOUR)
    parser.add_argument("--last-hour", type=int, default=DEFAULT_LAST_HOUR)
    args = parser.parse_args()
    asyncio.run(seed_time_slots(args.first_hour, args.last_hour))


if __name__ == "__main__":
    main()
