"""Shared fixtures — in-memory stand-in for the asyncpg pool + ASGI test client.

The fake pool answers exactly the statements the repositories issue and raises
real asyncpg exception classes for constraint violations, so routes run end to
end without a live PostgreSQL.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import asyncpg
import pytest
from httpx import ASGITransport, AsyncClient

from core import db
from main import app


class FakePool:
    def __init__(self) -> None:
        self.vehicles: dict[int, dict] = {}
        self.readings: list[dict] = []
        self.closed = False
        self._next_id = 1
        self._last_timestamp: datetime | None = None

    def _now_utc(self) -> datetime:
        # Mirrors `now() AT TIME ZONE 'UTC'`: naive UTC, strictly increasing.
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    async def fetch(self, sql: str, *args):
        if "FROM public.vehicles" in sql:
            return [dict(v) for v in self.vehicles.values()]
        raise AssertionError(f"unexpected fetch: {sql}")

    async def fetchrow(self, sql: str, *args):
        if "FROM public.vehicle_odometer" in sql:
            (vehicle_id,) = args
            readings = [r for r in self.readings if r["vehicle_id"] == vehicle_id]
            if not readings:
                return None
            latest = max(readings, key=lambda r: r["timestamp"])
            return {
                "vehicle_id": latest["vehicle_id"],
                "vehicle_name": self.vehicles[vehicle_id]["name"],
                "odometer": latest["odometer"],
                "timestamp": latest["timestamp"],
            }
        if "INSERT INTO public.vehicles" in sql:
            name, description = args
            vehicle_id = self._next_id
            self._next_id += 1
            self.vehicles[vehicle_id] = {"id": vehicle_id, "name": name, "description": description}
            return {"id": vehicle_id}
        if "DELETE FROM public.vehicles" in sql:
            (vehicle_id,) = args
            if vehicle_id not in self.vehicles:
                return None
            if any(r["vehicle_id"] == vehicle_id for r in self.readings):
                raise asyncpg.ForeignKeyViolationError(
                    'update or delete on table "vehicles" violates foreign key constraint '
                    '"vehicle_odometer_vehicle_id_fkey" on table "vehicle_odometer"'
                )
            del self.vehicles[vehicle_id]
            return {"id": vehicle_id}
        if "FROM public.vehicles" in sql:
            (vehicle_id,) = args
            row = self.vehicles.get(vehicle_id)
            return dict(row) if row is not None else None
        raise AssertionError(f"unexpected fetchrow: {sql}")

    async def execute(self, sql: str, *args):
        if "INSERT INTO public.vehicle_odometer" in sql:
            vehicle_id, odometer = args
            if vehicle_id not in self.vehicles:
                raise asyncpg.ForeignKeyViolationError(
                    'insert or update on table "vehicle_odometer" violates foreign key constraint '
                    '"vehicle_odometer_vehicle_id_fkey"'
                )
            self.readings.append(
                {"vehicle_id": vehicle_id, "odometer": odometer, "timestamp": self._now_utc()}
            )
            return "INSERT 0 1"
        raise AssertionError(f"unexpected execute: {sql}")

    async def close(self) -> None:
        self.closed = True


class BrokenPool:
    """Every call fails the way a dropped connection does."""

    def __init__(self) -> None:
        self.calls = 0

    async def _fail(self, *args, **kwargs):
        self.calls += 1
        raise asyncpg.exceptions.ConnectionDoesNotExistError("connection was closed in the middle of operation")

    fetch = _fail
    fetchrow = _fail
    execute = _fail


@pytest.fixture
def fake_pool(monkeypatch):
    pool = FakePool()
    monkeypatch.setattr(db, "_pool", pool)
    return pool


@pytest.fixture
def broken_pool(monkeypatch):
    pool = BrokenPool()
    monkeypatch.setattr(db, "_pool", pool)
    return pool


@pytest.fixture
async def client(fake_pool):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def broken_client(broken_pool):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def create_vehicle(client):
    async def _create(name: str = "Van", description: str = "Delivery van") -> int:
        res = await client.post("/vehicles", json={"name": name, "description": description})
        assert res.status_code == 200
        return res.json()

    return _create
