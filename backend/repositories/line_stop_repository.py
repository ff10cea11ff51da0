"""Line/stop association: validate stop ids, stage, replace and list line_stop rows."""
from collections.abc import Iterable
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from models.line import Line
from models.line_stop import LineStop
from models.stop import Stop


def unique_stop_ids(stop_ids: Iterable[int]) -> list[int]:
    """Collapse repeated ids, keeping the first occurrence order."""
    return list(dict.fromkeys(stop_ids))


def find_missing_stop_id(session: Session, stop_ids: Iterable[int]) -> Optional[int]:
    """Return the first requested stop id with no stop row, or None when all exist."""
    requested = unique_stop_ids(stop_ids)
    if not requested:
        return None
    found = set(session.execute(select(Stop.id).where(Stop.id.in_(requested))).scalars().all())
    for stop_id in requested:
        if stop_id not in found:
            return stop_id
    return None


def add_line_stops(session: Session, line_id: int, stop_ids: Iterable[int]) -> list[LineStop]:
    """Stage one line_stop row per stop id. Caller owns the transaction."""
    rows = [LineStop(line_id=line_id, stop_id=stop_id) for stop_id in unique_stop_ids(stop_ids)]
    session.add_all(rows)
    return rows


def replace_line_stops(session: Session, line_id: int, stop_ids: Iterable[int]) -> list[LineStop]:
    """Delete every association of the line, then stage the new set. Caller owns the transaction."""
    session.execute(delete(LineStop).where(LineStop.line_id == line_id))
    return add_line_stops(session, line_id, stop_ids)


def list_stops_for_line(session: Session, line_id: int) -> list[Stop]:
    """Return the stops associated with a line, ordered by stop id."""
    result = session.execute(
        select(Stop)
        .join(LineStop, LineStop.stop_id == Stop.id)
        .where(LineStop.line_id == line_id)
        .order_by(Stop.id)
    )
    return list(result.scalars().all())


def list_lines_for_stop(session: Session, stop_id: int) -> list[Line]:
    """Return the lines that serve a stop, ordered by line id."""
    result = session.execute(
        select(Line)
        .join(LineStop, LineStop.line_id == Line.id)
        .where(LineStop.stop_id == stop_id)
        .order_by(Line.id)
    )
    return list(result.scalars().all())
