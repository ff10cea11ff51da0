"""SQLAlchemy declarative base for the transit tables (stop, line, line_stop, vehicle, vehicle_position)."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all DB models."""
    pass
