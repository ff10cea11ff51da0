"""Line (linha) model for DB persistence."""
from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Line(Base):
    """Line table: caller-assigned id and name. Stops live in line_stop, vehicles point here via line_id."""

    __tablename__ = "line"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
