"""Vehicle position repository: list, get, create, update, delete."""
import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from db import write_transaction
from models.vehicle_position import VehiclePosition
from repositories.vehicle_repository import VEHICLE_NOT_FOUND, find_vehicle
from utils.errors import NotFoundError

LOG = logging.getLogger(__name__)

POSITION_NOT_FOUND = "Posição não encontrada!"
POSITION_CONFLICT = "Posição já cadastrada no sistema!"


def list_positions(session: Session) -> list[VehiclePosition]:
    """Return all position reports."""
    result = session.execute(select(VehiclePosition).order_by(VehiclePosition.id))
    return list(result.scalars().all())


def find_position(session: Session, position_id: int) -> Optional[VehiclePosition]:
    """Return a position by id or None."""
    return session.execute(
        select(VehiclePosition).where(VehiclePosition.id == position_id)
    ).scalar_one_or_none()


def get_position(session: Session, position_id: int) -> VehiclePosition:
    """Return a position by id or raise NotFoundError."""
    position = find_position(session, position_id)
    if position is None:
        raise NotFoundError(POSITION_NOT_FOUND)
    return position


def _ensure_vehicle_exists(session: Session, vehicle_id: int) -> None:
    if find_vehicle(session, vehicle_id) is None:
        raise NotFoundError(VEHICLE_NOT_FOUND, details={"vehicle_id": vehicle_id})


def create_position(session: Session, *, latitude: float, longitude: float, vehicle_id: int) -> VehiclePosition:
    """Record a position for an existing vehicle; the id is generated by the store."""
    _ensure_vehicle_exists(session, vehicle_id)
    position = VehiclePosition(latitude=latitude, longitude=longitude, vehicle_id=vehicle_id)
    with write_transaction(session, conflict_message=POSITION_CONFLICT, not_found_message=VEHICLE_NOT_FOUND):
        session.add(position)
        session.flush()
        position_id = position.id
    LOG.info("Created position %s for vehicle %s", position_id, vehicle_id)
    return position


def update_position(session: Session, position_id: int, changes: dict[str, Any]) -> VehiclePosition:
    """Apply the supplied fields (latitude, longitude, vehicle_id) to a position."""
    position = get_position(session, position_id)
    if changes.get("vehicle_id") is not None:
        _ensure_vehicle_exists(session, changes["vehicle_id"])
    with write_transaction(session, conflict_message=POSITION_CONFLICT, not_found_message=VEHICLE_NOT_FOUND):
        for field in ("latitude", "longitude", "vehicle_id"):
            if changes.get(field) is not None:
                setattr(position, field, changes[field])
    LOG.info("Updated position %s", position_id)
    return position


def delete_position(session: Session, position_id: int) -> None:
    """Delete a position report."""
    position = get_position(session, position_id)
    with write_transaction(session, conflict_message=POSITION_CONFLICT):
        session.delete(position)
    LOG.info("Deleted position %s", position_id)
