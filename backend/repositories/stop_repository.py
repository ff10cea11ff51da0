"""Stop repository: list, get, create, update, delete, nearby search and lines per stop."""
import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from db import write_transaction
from models.line import Line
from models.stop import Stop
from repositories.line_stop_repository import list_lines_for_stop
from utils.errors import ConflictError, NotFoundError

LOG = logging.getLogger(__name__)

# Half-width of the bounding box used by the nearby search, in degrees.
NEARBY_WINDOW_DEGREES = 1.0

STOP_NOT_FOUND = "Parada não encontrada!"
STOP_CONFLICT = "Parada com mesmo id já foi cadastrada no sistema!"


def list_stops(session: Session) -> list[Stop]:
    """Return all stops."""
    result = session.execute(select(Stop).order_by(Stop.id))
    return list(result.scalars().all())


def find_stop(session: Session, stop_id: int) -> Optional[Stop]:
    """Return a stop by id or None."""
    return session.execute(select(Stop).where(Stop.id == stop_id)).scalar_one_or_none()


def get_stop(session: Session, stop_id: int) -> Stop:
    """Return a stop by id or raise NotFoundError."""
    stop = find_stop(session, stop_id)
    if stop is None:
        raise NotFoundError(STOP_NOT_FOUND)
    return stop


def create_stop(session: Session, *, stop_id: int, name: str, latitude: float, longitude: float) -> Stop:
    """Create a stop with a caller-assigned id. Raises ConflictError if the id is taken."""
    if find_stop(session, stop_id) is not None:
        raise ConflictError(STOP_CONFLICT)
    stop = Stop(id=stop_id, name=name, latitude=latitude, longitude=longitude)
    with write_transaction(session, conflict_message=STOP_CONFLICT):
        session.add(stop)
    LOG.info("Created stop %s", stop_id)
    return stop


def update_stop(session: Session, current_id: int, changes: dict[str, Any]) -> Stop:
    """Apply the supplied fields (id, name, latitude, longitude) to the stop at current_id."""
    stop = get_stop(session, current_id)
    new_id = changes.get("id")
    if new_id is not None and new_id != current_id and find_stop(session, new_id) is not None:
        raise ConflictError(STOP_CONFLICT)
    with write_transaction(session, conflict_message=STOP_CONFLICT):
        for field in ("id", "name", "latitude", "longitude"):
            if field in changes and changes[field] is not None:
                setattr(stop, field, changes[field])
    LOG.info("Updated stop %s", current_id)
    return stop


def delete_stop(session: Session, stop_id: int) -> None:
    """Delete a stop; its line_stop rows go with it."""
    stop = get_stop(session, stop_id)
    with write_transaction(session, conflict_message=STOP_CONFLICT):
        session.delete(stop)
    LOG.info("Deleted stop %s", stop_id)


def list_stops_near(
    session: Session,
    latitude: float,
    longitude: float,
    window: float = NEARBY_WINDOW_DEGREES,
) -> list[Stop]:
    """Return stops inside the square of +/- window degrees around (latitude, longitude).

    This is a coarse bounding box, not a distance ranking; results are ordered by id.
    """
    result = session.execute(
        select(Stop)
        .where(Stop.latitude.between(latitude - window, latitude + window))
        .where(Stop.longitude.between(longitude - window, longitude + window))
        .order_by(Stop.id)
    )
    return list(result.scalars().all())


def get_stop_with_lines(session: Session, stop_id: int) -> tuple[Stop, list[Line]]:
    """Return the stop and the lines that serve it. Raises NotFoundError if the stop is absent."""
    stop = get_stop(session, stop_id)
    return stop, list_lines_for_stop(session, stop_id)
