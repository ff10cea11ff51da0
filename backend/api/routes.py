"""Service-level routes: health and root info."""
from fastapi import APIRouter

from schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@router.get("/")
def root() -> dict:
    """Root info."""
    return {"service": "transit-api", "docs": "/docs", "health": "/health"}
