"""Shared schema types and response schemas."""
from typing import Annotated, Any

from fastapi import Path
from pydantic import BaseModel, Field

# Ids are stored as signed 64-bit integers.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

EntityId = Annotated[int, Field(ge=MIN_ID, le=MAX_ID)]
PathId = Annotated[int, Path(ge=MIN_ID, le=MAX_ID)]
Coordinate = Annotated[float, Field(allow_inf_nan=False)]


class MessageResponse(BaseModel):
    """Confirmation returned by create and update."""

    message: str


class ErrorResponse(BaseModel):
    """Body of 400/500 responses."""

    message: str
    error: str | None = None
    validation: list[dict[str, Any]] | None = None


# OpenAPI documentation for the error bodies every resource router can return.
ERROR_RESPONSES: dict = {
    400: {"model": ErrorResponse, "description": "Validation failed, entity not found or id already taken"},
    500: {"model": ErrorResponse, "description": "Persistence failure; the transaction was rolled back"},
}
