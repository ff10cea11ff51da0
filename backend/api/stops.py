"""Stop (parada) API routes."""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from db import get_db
from models.stop import Stop
from repositories.stop_repository import (
    create_stop as repo_create_stop,
    delete_stop as repo_delete_stop,
    get_stop as repo_get_stop,
    get_stop_with_lines as repo_get_stop_with_lines,
    list_stops as repo_list_stops,
    list_stops_near as repo_list_stops_near,
    update_stop as repo_update_stop,
)
from schemas.common import ERROR_RESPONSES, MessageResponse, PathId
from schemas.stops import StopCreate, StopLine, StopResponse, StopUpdate, StopWithLines

router = APIRouter(tags=["paradas"], responses=ERROR_RESPONSES)


def stop_to_response(stop: Stop) -> StopResponse:
    """Build StopResponse from model instance."""
    return StopResponse(id=stop.id, name=stop.name, latitude=stop.latitude, longitude=stop.longitude)


@router.get("/paradas", response_model=list[StopResponse])
def list_stops(db: Session = Depends(get_db)) -> list[StopResponse]:
    """List all stops."""
    return [stop_to_response(s) for s in repo_list_stops(db)]


@router.get("/paradas-posicao", response_model=list[StopResponse])
def list_stops_near(
    latitude: float = Query(..., allow_inf_nan=False),
    longitude: float = Query(..., allow_inf_nan=False),
    db: Session = Depends(get_db),
) -> list[StopResponse]:
    """List stops within one degree of latitude and longitude of the given point."""
    return [stop_to_response(s) for s in repo_list_stops_near(db, latitude, longitude)]


@router.get("/paradas/{stop_id}", response_model=StopResponse)
def get_stop(stop_id: PathId, db: Session = Depends(get_db)) -> StopResponse:
    """Get one stop."""
    return stop_to_response(repo_get_stop(db, stop_id))


@router.get("/paradas/{stop_id}/linhas", response_model=StopWithLines)
def get_stop_lines(stop_id: PathId, db: Session = Depends(get_db)) -> StopWithLines:
    """Get a stop with the lines that serve it."""
    stop, lines = repo_get_stop_with_lines(db, stop_id)
    return StopWithLines(
        **stop_to_response(stop).model_dump(),
        linhas=[StopLine(id=line.id, name=line.name) for line in lines],
    )


@router.post("/paradas", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_stop(body: StopCreate, db: Session = Depends(get_db)) -> MessageResponse:
    """Create a stop with a caller-assigned id."""
    repo_create_stop(db, stop_id=body.id, name=body.name, latitude=body.latitude, longitude=body.longitude)
    return MessageResponse(message="Parada adicionada com sucesso!")


@router.put("/paradas/{stop_id}", response_model=MessageResponse)
def update_stop(stop_id: PathId, body: StopUpdate, db: Session = Depends(get_db)) -> MessageResponse:
    """Update the fields sent in the body."""
    repo_update_stop(db, stop_id, body.model_dump(exclude_unset=True))
    return MessageResponse(message="Parada atualizada com sucesso!")


@router.delete("/paradas/{stop_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_stop(stop_id: PathId, db: Session = Depends(get_db)) -> None:
    """Delete a stop. Its line associations are removed with it."""
    repo_delete_stop(db, stop_id)
    return None
