"""
Odometer persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def get_latest_reading(vehicle_id: int) -> dict | None:
    """
    Newest reading for a vehicle, joined with the vehicle name.
    """
    return await db.fetch_one(
        """
        SELECT o.vehicle_id, v."name" AS vehicle_name, o.odometer, o."timestamp"
        FROM public.vehicle_odometer o
        INNER JOIN public.vehicles v ON o.vehicle_id = v.id
        WHERE o.vehicle_id = $1
        ORDER BY o."timestamp" DESC
        LIMIT 1
        """,
        vehicle_id,
    )


async def insert_reading(vehicle_id: int, *, odometer: int) -> None:
    # The timestamp comes from the database clock, never from the caller.
    await db.execute(
        """
        INSERT INTO public.vehicle_odometer (vehicle_id, odometer, "timestamp")
        VALUES ($1, $2, (now() AT TIME ZONE 'UTC'))
        """,
        vehicle_id,
        odometer,
    )
