"""Pydantic schemas for line (linha) API."""
from pydantic import BaseModel, Field

from .common import EntityId
from .stops import StopResponse
from .vehicles import VehicleResponse


class LineCreate(BaseModel):
    """Payload for creating a line with the ids of the stops it serves."""

    id: EntityId
    name: str = Field(..., min_length=1)
    stopIds: list[EntityId] = Field(default_factory=list)


class LineUpdate(BaseModel):
    """Payload for updating a line. stopIds, when sent (even empty), replaces the whole stop set."""

    id: EntityId | None = None
    name: str | None = Field(default=None, min_length=1)
    stopIds: list[EntityId] | None = None


class LineResponse(BaseModel):
    """Line without associations."""

    id: int
    name: str


class LineWithStops(LineResponse):
    """Line with its stops (GET /linhas, GET /linhas/{id})."""

    paradas: list[StopResponse]


class LineWithVehicles(LineResponse):
    """Line with its vehicles (GET /linhas/{id}/veiculos)."""

    veiculos: list[VehicleResponse]
