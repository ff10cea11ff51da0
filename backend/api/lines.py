"""Line (linha) API routes."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.stops import stop_to_response
from api.vehicles import vehicle_to_response
from db import get_db
from models.line import Line
from models.stop import Stop
from repositories.line_repository import (
    create_line as repo_create_line,
    delete_line as repo_delete_line,
    get_line_with_stops as repo_get_line_with_stops,
    get_line_with_vehicles as repo_get_line_with_vehicles,
    list_lines_with_stops as repo_list_lines_with_stops,
    update_line as repo_update_line,
)
from schemas.common import ERROR_RESPONSES, MessageResponse, PathId
from schemas.lines import LineCreate, LineUpdate, LineWithStops, LineWithVehicles

router = APIRouter(tags=["linhas"], responses=ERROR_RESPONSES)


def _line_with_stops(line: Line, stops: list[Stop]) -> LineWithStops:
    return LineWithStops(id=line.id, name=line.name, paradas=[stop_to_response(s) for s in stops])


@router.get("/linhas", response_model=list[LineWithStops])
def list_lines(db: Session = Depends(get_db)) -> list[LineWithStops]:
    """List all lines, each with its stops."""
    return [_line_with_stops(line, stops) for line, stops in repo_list_lines_with_stops(db)]


@router.get("/linhas/{line_id}", response_model=LineWithStops)
def get_line(line_id: PathId, db: Session = Depends(get_db)) -> LineWithStops:
    """Get a line with its stops."""
    line, stops = repo_get_line_with_stops(db, line_id)
    return _line_with_stops(line, stops)


@router.get("/linhas/{line_id}/veiculos", response_model=LineWithVehicles)
def get_line_vehicles(line_id: PathId, db: Session = Depends(get_db)) -> LineWithVehicles:
    """Get a line with the vehicles assigned to it."""
    line, vehicles = repo_get_line_with_vehicles(db, line_id)
    return LineWithVehicles(id=line.id, name=line.name, veiculos=[vehicle_to_response(v) for v in vehicles])


@router.post("/linhas", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_line(body: LineCreate, db: Session = Depends(get_db)) -> MessageResponse:
    """Create a line and associate it with existing stops."""
    repo_create_line(db, line_id=body.id, name=body.name, stop_ids=body.stopIds)
    return MessageResponse(message="Linha adicionada com sucesso!")


@router.put("/linhas/{line_id}", response_model=MessageResponse)
def update_line(line_id: PathId, body: LineUpdate, db: Session = Depends(get_db)) -> MessageResponse:
    """Update the fields sent in the body; stopIds replaces the stop set."""
    changes = body.model_dump(exclude_unset=True, exclude={"stopIds"})
    repo_update_line(db, line_id, changes, stop_ids=body.stopIds)
    return MessageResponse(message="Linha atualizada com sucesso!")


@router.delete("/linhas/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_line(line_id: PathId, db: Session = Depends(get_db)) -> None:
    """Delete a line. Its stop associations go with it; its vehicles lose their line."""
    repo_delete_line(db, line_id)
    return None
