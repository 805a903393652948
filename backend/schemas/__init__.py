# Schemas package
from .health import HealthResponse
from .hotels import HotelAggregate, HotelResponse, HotelWriteResponse, MessageResponse

__all__ = [
    "HealthResponse",
    "HotelAggregate",
    "HotelResponse",
    "HotelWriteResponse",
    "MessageResponse",
]
