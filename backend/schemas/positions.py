"""Pydantic schemas for vehicle position API."""
from pydantic import BaseModel

from .common import Coordinate, EntityId


class PositionCreate(BaseModel):
    """Payload for recording a vehicle position."""

    latitude: Coordinate
    longitude: Coordinate
    vehicleId: EntityId


class PositionUpdate(BaseModel):
    """Payload for updating a position (all fields optional)."""

    latitude: Coordinate | None = None
    longitude: Coordinate | None = None
    vehicleId: EntityId | None = None


class PositionResponse(BaseModel):
    """Position in list/detail responses."""

    id: int
    latitude: float
    longitude: float
    vehicle_id: int | None = None
