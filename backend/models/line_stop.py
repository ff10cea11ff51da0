"""LineStop model: many stops per line, many lines per stop."""
from sqlalchemy import BigInteger, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class LineStop(Base):
    """line_stop table: one row per (line, stop) pair; rows follow line/stop deletes and id changes."""

    __tablename__ = "line_stop"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    line_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("line.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )
    stop_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("stop.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )

    __table_args__ = (UniqueConstraint("line_id", "stop_id", name="uq_line_stop_line_id_stop_id"),)
