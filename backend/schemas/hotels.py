"""Pydantic schemas for hotel API."""
from pydantic import BaseModel, ConfigDict, Field


class HotelResponse(BaseModel):
    """Hotel in list/detail responses. The id is exposed as ``_id``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    location: str
    price: float
    rooms: int


class HotelWriteResponse(BaseModel):
    """Acknowledgement for create and update."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    id: str = Field(..., alias="_id")


class HotelAggregate(BaseModel):
    """Per-location summary from GET /hotels/aggregate."""

    location: str
    averagePrice: float
    totalRooms: int
    hotelCount: int


class MessageResponse(BaseModel):
    """Error body: {"message": ...}."""

    message: str
