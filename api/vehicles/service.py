"""
Vehicle business logic.

Every store failure is logged here with its real cause and surfaced to the
client as a generic 500. Only the "not found" and "still referenced" outcomes
get their own status codes.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_vehicle_response(row: dict) -> schemas.VehicleResponse:
    return schemas.VehicleResponse(
        id=int(row["id"]),
        name=str(row["name"]),
        description=str(row["description"]),
    )


async def list_vehicles() -> schemas.VehicleListResponse:
    try:
        rows = await repository.list_vehicles()
    except Exception as exc:
        logger.exception("list_vehicles_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to query vehicles",
        ) from exc

    vehicles = [_to_vehicle_response(row) for row in rows]
    return schemas.VehicleListResponse(rows=len(vehicles), vehicles=vehicles)


async def get_vehicle(vehicle_id: int) -> schemas.VehicleResponse:
    try:
        row = await repository.get_vehicle_by_id(vehicle_id)
    except Exception as exc:
        logger.exception("get_vehicle_failed vehicle_id=%s", vehicle_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to query vehicle",
        ) from exc

    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vehicle not found")
    return _to_vehicle_response(row)


async def create_vehicle(payload: schemas.CreateVehicleRequest) -> int:
    # NOT NULL and other constraint failures count as store faults here.
    try:
        vehicle_id = await repository.create_vehicle(
            name=payload.name,
            description=payload.description,
        )
    except Exception as exc:
        logger.exception("create_vehicle_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create vehicle",
        ) from exc

    logger.info("vehicle_created vehicle_id=%s", vehicle_id)
    return vehicle_id


async def delete_vehicle(vehicle_id: int) -> None:
    try:
        row = await repository.delete_vehicle_by_id(vehicle_id)
    except Exception as exc:
        if db.is_foreign_key_violation(exc):
            logger.warning("delete_vehicle_blocked vehicle_id=%s reason=odometer_readings", vehicle_id)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Vehicle has odometer readings",
            ) from exc
        logger.exception("delete_vehicle_failed vehicle_id=%s", vehicle_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete vehicle",
        ) from exc

    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vehicle not found")
    logger.info("vehicle_deleted vehicle_id=%s", vehicle_id)
