"""Vehicle (veículo) API routes."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from db import get_db
from models.vehicle import Vehicle
from repositories.vehicle_repository import (
    create_vehicle as repo_create_vehicle,
    delete_vehicle as repo_delete_vehicle,
    get_vehicle as repo_get_vehicle,
    list_vehicles as repo_list_vehicles,
    update_vehicle as repo_update_vehicle,
)
from schemas.common import ERROR_RESPONSES, MessageResponse, PathId
from schemas.vehicles import VehicleCreate, VehicleResponse, VehicleUpdate

router = APIRouter(tags=["veiculos"], responses=ERROR_RESPONSES)


def vehicle_to_response(v: Vehicle) -> VehicleResponse:
    """Build VehicleResponse from model instance."""
    return VehicleResponse(id=v.id, name=v.name, model=v.model, line_id=v.line_id)


@router.get("/veiculos", response_model=list[VehicleResponse])
def list_vehicles(db: Session = Depends(get_db)) -> list[VehicleResponse]:
    """List all vehicles."""
    return [vehicle_to_response(v) for v in repo_list_vehicles(db)]


@router.get("/veiculos/{vehicle_id}", response_model=VehicleResponse)
def get_vehicle(vehicle_id: PathId, db: Session = Depends(get_db)) -> VehicleResponse:
    """Get one vehicle."""
    return vehicle_to_response(repo_get_vehicle(db, vehicle_id))


@router.post("/veiculos", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_vehicle(body: VehicleCreate, db: Session = Depends(get_db)) -> MessageResponse:
    """Create a vehicle; lineId, when sent, must name an existing line."""
    repo_create_vehicle(db, vehicle_id=body.id, name=body.name, model=body.model, line_id=body.lineId)
    return MessageResponse(message="Veículo adicionado com sucesso!")


@router.put("/veiculos/{vehicle_id}", response_model=MessageResponse)
def update_vehicle(vehicle_id: PathId, body: VehicleUpdate, db: Session = Depends(get_db)) -> MessageResponse:
    """Update the fields sent in the body."""
    changes = body.model_dump(exclude_unset=True)
    if "lineId" in changes:
        changes["line_id"] = changes.pop("lineId")
    repo_update_vehicle(db, vehicle_id, changes)
    return MessageResponse(message="Veículo atualizado com sucesso!")


@router.delete("/veiculos/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vehicle(vehicle_id: PathId, db: Session = Depends(get_db)) -> None:
    """Delete a vehicle. Its positions are kept with no vehicle."""
    repo_delete_vehicle(db, vehicle_id)
    return None
