"""Hotel repository: create, list, aggregate, distinct, get, update, delete."""
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.hotel import HOTEL_FIELDS, Hotel
from utils.hotel_query import HotelQuery


def create_hotel(session: Session, *, name: str, location: str, price: float, rooms: int) -> Hotel:
    """Create a hotel, commit, and return it. Id is generated by the model default."""
    hotel = Hotel(name=name, location=location, price=price, rooms=rooms)
    session.add(hotel)
    session.commit()
    session.refresh(hotel)
    return hotel


def get_hotel(session: Session, hotel_id: str) -> Optional[Hotel]:
    """Return a hotel by id or None."""
    return session.get(Hotel, hotel_id)


def list_hotels(session: Session, query: HotelQuery) -> list[Hotel]:
    """Return hotels matching every filter in query, sorted and limited to its page window."""
    stmt = select(Hotel)
    if query.location is not None:
        stmt = stmt.where(Hotel.location == query.location)
    if query.price_range is not None:
        stmt = stmt.where(Hotel.price.between(*query.price_range))
    if query.rooms_range is not None:
        stmt = stmt.where(Hotel.rooms.between(*query.rooms_range))
    if query.sort_field is not None:
        column = getattr(Hotel, query.sort_field)
        stmt = stmt.order_by(column.desc() if query.sort_descending else column.asc())
    stmt = stmt.offset(query.skip).limit(query.limit)
    return list(session.execute(stmt).scalars().all())


def aggregate_by_location(session: Session, location: Optional[str] = None) -> list[dict[str, Any]]:
    """
    Group hotels by location and summarize each group.

    Returns dicts with location, averagePrice (float mean), totalRooms (sum)
    and hotelCount, ordered by location. Only non-empty groups appear.
    """
    stmt = select(
        Hotel.location,
        func.avg(Hotel.price),
        func.sum(Hotel.rooms),
        func.count(Hotel.id),
    )
    if location:
        stmt = stmt.where(Hotel.location == location)
    stmt = stmt.group_by(Hotel.location).order_by(Hotel.location)
    return [
        {
            "location": loc,
            "averagePrice": float(avg_price),
            "totalRooms": int(total_rooms),
            "hotelCount": int(count),
        }
        for loc, avg_price, total_rooms, count in session.execute(stmt).all()
    ]


def list_distinct_values(session: Session, field: str) -> list[Any]:
    """Return the distinct values of one hotel attribute, sorted ascending."""
    if field not in HOTEL_FIELDS:
        raise ValueError(f"Unknown hotel field: {field}")
    column = getattr(Hotel, field)
    result = session.execute(select(column).distinct().order_by(column))
    return list(result.scalars().all())


def update_hotel(
    session: Session,
    hotel_id: str,
    *,
    name: str,
    location: str,
    price: float,
    rooms: int,
) -> Optional[Hotel]:
    """Replace the business fields of a hotel. Returns updated hotel or None if not found."""
    hotel = get_hotel(session, hotel_id)
    if hotel is None:
        return None
    hotel.name = name
    hotel.location = location
    hotel.price = price
    hotel.rooms = rooms
    session.commit()
    session.refresh(hotel)
    return hotel


def delete_hotel(session: Session, hotel_id: str) -> bool:
    """Delete a hotel by id. Returns True if deleted, False if it did not exist."""
    hotel = get_hotel(session, hotel_id)
    if hotel is None:
        return False
    session.delete(hotel)
    session.commit()
    return True
