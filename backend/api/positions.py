"""Vehicle position (posição) API routes."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from db import get_db
from models.vehicle_position import VehiclePosition
from repositories.position_repository import (
    create_position as repo_create_position,
    delete_position as repo_delete_position,
    get_position as repo_get_position,
    list_positions as repo_list_positions,
    update_position as repo_update_position,
)
from schemas.common import ERROR_RESPONSES, MessageResponse, PathId
from schemas.positions import PositionCreate, PositionResponse, PositionUpdate

router = APIRouter(tags=["posicoes"], responses=ERROR_RESPONSES)


def _position_to_response(p: VehiclePosition) -> PositionResponse:
    return PositionResponse(id=p.id, latitude=p.latitude, longitude=p.longitude, vehicle_id=p.vehicle_id)


@router.get("/posicoes", response_model=list[PositionResponse])
def list_positions(db: Session = Depends(get_db)) -> list[PositionResponse]:
    """List all position reports."""
    return [_position_to_response(p) for p in repo_list_positions(db)]


@router.get("/posicoes/{position_id}", response_model=PositionResponse)
def get_position(position_id: PathId, db: Session = Depends(get_db)) -> PositionResponse:
    """Get one position report."""
    return _position_to_response(repo_get_position(db, position_id))


@router.post("/posicoes", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_position(body: PositionCreate, db: Session = Depends(get_db)) -> MessageResponse:
    """Record a position for an existing vehicle."""
    repo_create_position(db, latitude=body.latitude, longitude=body.longitude, vehicle_id=body.vehicleId)
    return MessageResponse(message="Posição adicionada com sucesso!")


@router.put("/posicoes/{position_id}", response_model=MessageResponse)
def update_position(position_id: PathId, body: PositionUpdate, db: Session = Depends(get_db)) -> MessageResponse:
    """Update the fields sent in the body."""
    changes = body.model_dump(exclude_unset=True)
    if "vehicleId" in changes:
        changes["vehicle_id"] = changes.pop("vehicleId")
    repo_update_position(db, position_id, changes)
    return MessageResponse(message="Posição atualizada com sucesso!")


@router.delete("/posicoes/{position_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_position(position_id: PathId, db: Session = Depends(get_db)) -> None:
    """Delete a position report."""
    repo_delete_position(db, position_id)
    return None
