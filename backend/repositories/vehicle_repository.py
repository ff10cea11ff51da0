"""Vehicle repository: list, get, create, update, delete."""
import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from db import write_transaction
from models.vehicle import Vehicle
from repositories.line_repository import LINE_NOT_FOUND, find_line
from utils.errors import ConflictError, NotFoundError

LOG = logging.getLogger(__name__)

VEHICLE_NOT_FOUND = "Veículo não encontrado!"
VEHICLE_CONFLICT = "Veículo com mesmo id já foi cadastrado no sistema!"

_UNSET = object()


def list_vehicles(session: Session) -> list[Vehicle]:
    """Return all vehicles."""
    result = session.execute(select(Vehicle).order_by(Vehicle.id))
    return list(result.scalars().all())


def find_vehicle(session: Session, vehicle_id: int) -> Optional[Vehicle]:
    """Return vehicle by id or None."""
    return session.execute(select(Vehicle).where(Vehicle.id == vehicle_id)).scalar_one_or_none()


def get_vehicle(session: Session, vehicle_id: int) -> Vehicle:
    """Return vehicle by id or raise NotFoundError."""
    vehicle = find_vehicle(session, vehicle_id)
    if vehicle is None:
        raise NotFoundError(VEHICLE_NOT_FOUND)
    return vehicle


def _ensure_line_exists(session: Session, line_id: Optional[int]) -> None:
    if line_id is not None and find_line(session, line_id) is None:
        raise NotFoundError(LINE_NOT_FOUND, details={"line_id": line_id})


def create_vehicle(
    session: Session,
    *,
    vehicle_id: int,
    name: str,
    model: str,
    line_id: Optional[int] = None,
) -> Vehicle:
    """Create a vehicle, optionally assigned to an existing line."""
    _ensure_line_exists(session, line_id)
    if find_vehicle(session, vehicle_id) is not None:
        raise ConflictError(VEHICLE_CONFLICT)
    vehicle = Vehicle(id=vehicle_id, name=name, model=model, line_id=line_id)
    with write_transaction(session, conflict_message=VEHICLE_CONFLICT, not_found_message=LINE_NOT_FOUND):
        session.add(vehicle)
    LOG.info("Created vehicle %s (line %s)", vehicle_id, line_id)
    return vehicle


def update_vehicle(session: Session, current_id: int, changes: dict[str, Any]) -> Vehicle:
    """Apply the supplied fields to the vehicle at current_id.

    A line_id key set to None detaches the vehicle from its line.
    """
    vehicle = get_vehicle(session, current_id)
    line_id = changes.get("line_id", _UNSET)
    if line_id is not _UNSET:
        _ensure_line_exists(session, line_id)
    new_id = changes.get("id")
    if new_id is not None and new_id != current_id and find_vehicle(session, new_id) is not None:
        raise ConflictError(VEHICLE_CONFLICT)
    with write_transaction(session, conflict_message=VEHICLE_CONFLICT, not_found_message=LINE_NOT_FOUND):
        for field in ("id", "name", "model"):
            if changes.get(field) is not None:
                setattr(vehicle, field, changes[field])
        if line_id is not _UNSET:
            vehicle.line_id = line_id
    LOG.info("Updated vehicle %s", current_id)
    return vehicle


def delete_vehicle(session: Session, vehicle_id: int) -> None:
    """Delete a vehicle; its positions keep their rows with vehicle_id set to null."""
    vehicle = get_vehicle(session, vehicle_id)
    with write_transaction(session, conflict_message=VEHICLE_CONFLICT):
        session.delete(vehicle)
    LOG.info("Deleted vehicle %s", vehicle_id)
