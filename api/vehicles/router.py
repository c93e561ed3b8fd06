"""
Vehicle API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from . import schemas, service

router = APIRouter()


@router.get("/vehicles")
async def list_vehicles() -> schemas.VehicleListResponse:
    return await service.list_vehicles()


@router.get("/vehicles/{vehicle_id}")
async def get_vehicle(vehicle_id: schemas.VehicleId) -> schemas.VehicleResponse:
    return await service.get_vehicle(vehicle_id)


@router.post("/vehicles")
async def create_vehicle(request: schemas.CreateVehicleRequest) -> int:
    """
    Register a vehicle. The response body is the new id as a bare JSON integer.
    """
    return await service.create_vehicle(request)


@router.delete("/vehicles/{vehicle_id}", response_class=PlainTextResponse)
async def delete_vehicle(vehicle_id: schemas.VehicleId) -> str:
    await service.delete_vehicle(vehicle_id)
    return "Vehicle deleted"
