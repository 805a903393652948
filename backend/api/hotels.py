"""Hotel API routes."""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from db import get_db
from models.hotel import HOTEL_FIELDS, Hotel
from repositories.hotel_repository import (
    aggregate_by_location as repo_aggregate_by_location,
    create_hotel as repo_create_hotel,
    delete_hotel as repo_delete_hotel,
    get_hotel as repo_get_hotel,
    list_distinct_values as repo_list_distinct_values,
    list_hotels as repo_list_hotels,
    update_hotel as repo_update_hotel,
)
from schemas.hotels import HotelAggregate, HotelResponse, HotelWriteResponse, MessageResponse
from utils.hotel_query import build_hotel_query
from utils.hotel_validators import validate_hotel_payload

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/hotels", tags=["hotels"])

HOTEL_CREATED_MESSAGE = "Hotel successfully added!"
HOTEL_UPDATED_MESSAGE = "Hotel successfully updated!"
HOTEL_NOT_FOUND_MESSAGE = "Hotel not found"
INVALID_FIELD_MESSAGE = "Invalid field"


def _hotel_to_response(h: Hotel) -> HotelResponse:
    """Build HotelResponse from model instance."""
    return HotelResponse(
        id=h.id,
        name=h.name,
        location=h.location,
        price=float(h.price),
        rooms=h.rooms,
    )


def _validated(body: Any) -> dict[str, Any]:
    """Run payload validation; raise 400 with the uniform message on failure."""
    ok, normalized, error = validate_hotel_payload(body)
    if not ok:
        LOG.warning("Rejected hotel payload: %s", error)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    return normalized


@router.post(
    "",
    response_model=HotelWriteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}},
)
def create_hotel(
    body: Any = Body(default=None),
    db: Session = Depends(get_db),
) -> HotelWriteResponse:
    """Create a hotel. All of name, location, price and rooms must be present and valid."""
    data = _validated(body)
    hotel = repo_create_hotel(db, **data)
    LOG.info("Created hotel %s (%s, %s)", hotel.id, hotel.name, hotel.location)
    return HotelWriteResponse(message=HOTEL_CREATED_MESSAGE, id=hotel.id)


@router.get("", response_model=list[HotelResponse])
def list_hotels(
    page: Optional[str] = Query(None, description="1-based page index"),
    limit: Optional[str] = Query(None, description="Page size"),
    sort: Optional[str] = Query(None, description="Field to sort by; prefix with '-' for descending"),
    location: Optional[str] = Query(None, description="Exact location match"),
    price: Optional[str] = Query(None, description="Inclusive price range 'min,max'"),
    rooms: Optional[str] = Query(None, description="Inclusive rooms range 'min,max'"),
    db: Session = Depends(get_db),
) -> list[HotelResponse]:
    """List hotels with filtering, sorting and pagination. Malformed parameters are ignored."""
    query = build_hotel_query(
        page=page,
        limit=limit,
        sort=sort,
        location=location,
        price=price,
        rooms=rooms,
    )
    return [_hotel_to_response(h) for h in repo_list_hotels(db, query)]


@router.get("/aggregate", response_model=list[HotelAggregate])
def aggregate_hotels(
    location: Optional[str] = Query(None, description="Restrict to one location"),
    db: Session = Depends(get_db),
) -> list[HotelAggregate]:
    """Average price and total rooms per location."""
    return [HotelAggregate(**row) for row in repo_aggregate_by_location(db, location)]


@router.get(
    "/distinct",
    response_model=list[Any],
    responses={400: {"model": MessageResponse}},
)
def distinct_hotel_values(
    field: str = Query(..., description=f"One of: {', '.join(HOTEL_FIELDS)}"),
    db: Session = Depends(get_db),
) -> list[Any]:
    """Distinct values of one hotel field across all hotels."""
    if field not in HOTEL_FIELDS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_FIELD_MESSAGE)
    return repo_list_distinct_values(db, field)


@router.get(
    "/{hotel_id}",
    response_model=HotelResponse,
    responses={404: {"model": MessageResponse}},
)
def get_hotel(hotel_id: str, db: Session = Depends(get_db)) -> HotelResponse:
    """Get a hotel by id."""
    hotel = repo_get_hotel(db, hotel_id)
    if hotel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=HOTEL_NOT_FOUND_MESSAGE)
    return _hotel_to_response(hotel)


@router.put(
    "/{hotel_id}",
    response_model=HotelWriteResponse,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
def update_hotel(
    hotel_id: str,
    body: Any = Body(default=None),
    db: Session = Depends(get_db),
) -> HotelWriteResponse:
    """Replace name, location, price and rooms of an existing hotel."""
    data = _validated(body)
    hotel = repo_update_hotel(db, hotel_id, **data)
    if hotel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=HOTEL_NOT_FOUND_MESSAGE)
    LOG.info("Updated hotel %s", hotel.id)
    return HotelWriteResponse(message=HOTEL_UPDATED_MESSAGE, id=hotel.id)


@router.delete("/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_hotel(hotel_id: str, db: Session = Depends(get_db)) -> None:
    """Delete a hotel by id. Deleting an unknown id is not an error."""
    if repo_delete_hotel(db, hotel_id):
        LOG.info("Deleted hotel %s", hotel_id)
    return None
