"""Line repository: list, get, create, update, delete, with the line's stops and vehicles."""
import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from db import write_transaction
from models.line import Line
from models.stop import Stop
from models.vehicle import Vehicle
from repositories.line_stop_repository import (
    add_line_stops,
    find_missing_stop_id,
    list_stops_for_line,
    replace_line_stops,
    unique_stop_ids,
)
from utils.errors import ConflictError, NotFoundError

LOG = logging.getLogger(__name__)

LINE_NOT_FOUND = "Linha não encontrada!"
LINE_CONFLICT = "Linha com mesmo id já foi cadastrada no sistema!"


def stop_not_found_message(stop_id: int) -> str:
    return f"Parada com id {stop_id} não foi encontrada no sistema!"


def _ensure_stops_exist(session: Session, stop_ids: list[int]) -> None:
    missing = find_missing_stop_id(session, stop_ids)
    if missing is not None:
        raise NotFoundError(stop_not_found_message(missing), details={"stop_id": missing})


def list_lines(session: Session) -> list[Line]:
    """Return all lines."""
    result = session.execute(select(Line).order_by(Line.id))
    return list(result.scalars().all())


def list_lines_with_stops(session: Session) -> list[tuple[Line, list[Stop]]]:
    """Return every line paired with its stops."""
    return [(line, list_stops_for_line(session, line.id)) for line in list_lines(session)]


def find_line(session: Session, line_id: int) -> Optional[Line]:
    """Return a line by id or None."""
    return session.execute(select(Line).where(Line.id == line_id)).scalar_one_or_none()


def get_line(session: Session, line_id: int) -> Line:
    """Return a line by id or raise NotFoundError."""
    line = find_line(session, line_id)
    if line is None:
        raise NotFoundError(LINE_NOT_FOUND)
    return line


def get_line_with_stops(session: Session, line_id: int) -> tuple[Line, list[Stop]]:
    """Return the line and its stops. Raises NotFoundError if the line is absent."""
    line = get_line(session, line_id)
    return line, list_stops_for_line(session, line_id)


def get_line_with_vehicles(session: Session, line_id: int) -> tuple[Line, list[Vehicle]]:
    """Return the line and the vehicles assigned to it. Raises NotFoundError if the line is absent."""
    line = get_line(session, line_id)
    result = session.execute(select(Vehicle).where(Vehicle.line_id == line_id).order_by(Vehicle.id))
    return line, list(result.scalars().all())


def create_line(session: Session, *, line_id: int, name: str, stop_ids: list[int]) -> Line:
    """Create a line and its stop associations atomically.

    Every stop id is checked before anything is written; the line row and its
    line_stop rows are committed together or not at all.
    """
    if find_line(session, line_id) is not None:
        raise ConflictError(LINE_CONFLICT)
    stop_ids = unique_stop_ids(stop_ids)
    _ensure_stops_exist(session, stop_ids)
    line = Line(id=line_id, name=name)
    with write_transaction(session, conflict_message=LINE_CONFLICT):
        session.add(line)
        session.flush()  # line row must exist before its line_stop rows
        add_line_stops(session, line_id, stop_ids)
    LOG.info("Created line %s with %d stops", line_id, len(stop_ids))
    return line


def update_line(
    session: Session,
    current_id: int,
    changes: dict[str, Any],
    stop_ids: Optional[list[int]] = None,
) -> Line:
    """Update the supplied scalar fields and, when stop_ids is given, replace the association set.

    An empty stop_ids list clears every association. When the id itself changes,
    line_stop rows follow the new id (ON UPDATE CASCADE) and are replaced under it.
    """
    line = get_line(session, current_id)
    if stop_ids is not None:
        stop_ids = unique_stop_ids(stop_ids)
        _ensure_stops_exist(session, stop_ids)
    new_id = changes.get("id")
    if new_id is not None and new_id != current_id and find_line(session, new_id) is not None:
        raise ConflictError(LINE_CONFLICT)
    scalar_changes = {
        field: changes[field] for field in ("id", "name") if changes.get(field) is not None
    }
    target_id = new_id if new_id is not None else current_id
    with write_transaction(session, conflict_message=LINE_CONFLICT):
        if scalar_changes:
            for field, value in scalar_changes.items():
                setattr(line, field, value)
            session.flush()
        if stop_ids is not None:
            replace_line_stops(session, target_id, stop_ids)
    LOG.info("Updated line %s", current_id)
    return line


def delete_line(session: Session, line_id: int) -> None:
    """Delete a line; its line_stop rows are removed and its vehicles lose their line_id."""
    line = get_line(session, line_id)
    with write_transaction(session, conflict_message=LINE_CONFLICT):
        session.delete(line)
    LOG.info("Deleted line %s", line_id)
