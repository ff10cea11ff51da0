"""Pydantic schemas for stop (parada) API."""
from pydantic import BaseModel, Field

from .common import Coordinate, EntityId


class StopCreate(BaseModel):
    """Payload for creating a stop. The id is chosen by the caller."""

    id: EntityId
    name: str = Field(..., min_length=1)
    latitude: Coordinate
    longitude: Coordinate


class StopUpdate(BaseModel):
    """Payload for updating a stop (all fields optional; id renames the stop)."""

    id: EntityId | None = None
    name: str | None = Field(default=None, min_length=1)
    latitude: Coordinate | None = None
    longitude: Coordinate | None = None


class StopResponse(BaseModel):
    """Stop in list/detail responses."""

    id: int
    name: str
    latitude: float
    longitude: float


class StopLine(BaseModel):
    """Line as embedded in a stop's detail."""

    id: int
    name: str


class StopWithLines(StopResponse):
    """Stop with the lines that serve it (GET /paradas/{id}/linhas)."""

    linhas: list[StopLine]
