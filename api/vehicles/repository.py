"""
Vehicle persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_vehicles() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, "name", description
        FROM public.vehicles
        """
    )


async def get_vehicle_by_id(vehicle_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, "name", description
        FROM public.vehicles
        WHERE id = $1
        """,
        vehicle_id,
    )


async def create_vehicle(*, name: str, description: str) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO public.vehicles ("name", description)
        VALUES ($1, $2)
        RETURNING id
        """,
        name,
        description,
    )
    if row is None:
        raise RuntimeError("Failed to create vehicle.")
    return int(row["id"])


async def delete_vehicle_by_id(vehicle_id: int) -> dict | None:
    """
    Delete a vehicle. Returns the deleted id row, or None when no row matched.
    """
    return await db.fetch_one(
        """
        DELETE FROM public.vehicles
        WHERE id = $1
        RETURNING id
        """,
        vehicle_id,
    )
