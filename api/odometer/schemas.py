"""
Pydantic schemas for odometer endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt

from vehicles.schemas import INT4_MAX, INT4_MIN


class PostOdometerRequest(BaseModel):
    odometer: StrictInt = Field(..., ge=INT4_MIN, le=INT4_MAX)


class OdometerLatestResponse(BaseModel):
    vehicle_id: int
    vehicle_name: str
    odometer: int
    # UTC, assigned by the database at insert time.
    timestamp: datetime
