"""Vehicle (veículo) model for DB persistence."""
from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Vehicle(Base):
    """Vehicle table: caller-assigned id, name, model, optional line_id (nulled when the line is deleted)."""

    __tablename__ = "vehicle"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    line_id: Mapped[int | None] = mapped_column(
        BigInteger,
        ForeignKey("line.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
    )
