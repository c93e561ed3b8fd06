"""
Pydantic schemas for vehicle endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, StrictStr

# Ids are PostgreSQL `integer` columns.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

VehicleId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]


class CreateVehicleRequest(BaseModel):
    name: StrictStr
    description: StrictStr


class VehicleResponse(BaseModel):
    id: int
    name: str
    description: str


class VehicleListResponse(BaseModel):
    rows: int
    vehicles: list[VehicleResponse]
