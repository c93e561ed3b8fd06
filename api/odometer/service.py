"""
Odometer business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)


async def latest_reading(vehicle_id: int) -> schemas.OdometerLatestResponse:
    try:
        row = await repository.get_latest_reading(vehicle_id)
    except Exception as exc:
        logger.exception("get_odometer_failed vehicle_id=%s", vehicle_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to query odometer",
        ) from exc

    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No odometer record")

    return schemas.OdometerLatestResponse(
        vehicle_id=int(row["vehicle_id"]),
        vehicle_name=str(row["vehicle_name"]),
        odometer=int(row["odometer"]),
        timestamp=row["timestamp"],
    )


async def record_reading(vehicle_id: int, payload: schemas.PostOdometerRequest) -> None:
    """
    Append a reading. An unknown vehicle id is the caller's mistake (400);
    anything else the store rejects is ours (500).
    """
    try:
        await repository.insert_reading(vehicle_id, odometer=payload.odometer)
    except Exception as exc:
        if db.is_foreign_key_violation(exc):
            logger.info("odometer_rejected vehicle_id=%s reason=unknown_vehicle", vehicle_id)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid vehicle ID",
            ) from exc
        logger.exception("post_odometer_failed vehicle_id=%s", vehicle_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        ) from exc

    logger.info("odometer_recorded vehicle_id=%s odometer=%s", vehicle_id, payload.odometer)
