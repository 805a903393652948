"""Hotel model for DB persistence."""
import uuid

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base

# Attributes a client may filter, sort or enumerate on.
HOTEL_FIELDS = ("name", "location", "price", "rooms")


class Hotel(Base):
    """Hotel table: id, name, location, price, rooms."""

    __tablename__ = "hotel"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    rooms: Mapped[int] = mapped_column(Integer, nullable=False)
