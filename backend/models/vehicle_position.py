"""VehiclePosition model: coordinate reports for a vehicle."""
from sqlalchemy import BigInteger, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class VehiclePosition(Base):
    """vehicle_position table: generated id, latitude, longitude, vehicle_id (nulled when the vehicle is deleted)."""

    __tablename__ = "vehicle_position"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    vehicle_id: Mapped[int | None] = mapped_column(
        BigInteger,
        ForeignKey("vehicle.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
    )
