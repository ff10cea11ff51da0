"""Pydantic schemas for vehicle API."""
from pydantic import BaseModel, Field

from .common import EntityId


class VehicleCreate(BaseModel):
    """Payload for creating a vehicle, optionally assigned to a line."""

    id: EntityId
    name: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    lineId: EntityId | None = None


class VehicleUpdate(BaseModel):
    """Payload for updating a vehicle (all fields optional). lineId: null detaches it from its line."""

    id: EntityId | None = None
    name: str | None = Field(default=None, min_length=1)
    model: str | None = Field(default=None, min_length=1)
    lineId: EntityId | None = None


class VehicleResponse(BaseModel):
    """Vehicle in list/detail responses."""

    id: int
    name: str
    model: str
    line_id: int | None = None
