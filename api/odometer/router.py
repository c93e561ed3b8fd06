"""
Odometer API endpoints, nested under a vehicle.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from vehicles.schemas import VehicleId

from . import schemas, service

router = APIRouter()


@router.get("/vehicles/{vehicle_id}/odometer")
async def get_latest_odometer(vehicle_id: VehicleId) -> schemas.OdometerLatestResponse:
    return await service.latest_reading(vehicle_id)


@router.post("/vehicles/{vehicle_id}/odometer", response_class=PlainTextResponse)
async def post_odometer(vehicle_id: VehicleId, request: schemas.PostOdometerRequest) -> str:
    await service.record_reading(vehicle_id, request)
    return "Odometer updated successfully"
