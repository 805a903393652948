"""Translate GET /hotels query parameters into filter, sort and page window."""
import logging
import math
from dataclasses import dataclass
from typing import Optional

from models.hotel import HOTEL_FIELDS
from utils.config import HOTELS_DEFAULT_LIMIT, HOTELS_MAX_LIMIT

LOG = logging.getLogger(__name__)

# Largest OFFSET the database accepts (signed 64-bit).
MAX_SKIP = 2**63 - 1

NumericRange = tuple[float, float]


@dataclass(frozen=True)
class HotelQuery:
    """Storage-agnostic list query. None means the filter is not applied."""

    location: Optional[str] = None
    price_range: Optional[NumericRange] = None
    rooms_range: Optional[NumericRange] = None
    sort_field: Optional[str] = None
    sort_descending: bool = False
    skip: int = 0
    limit: int = HOTELS_DEFAULT_LIMIT


def _parse_positive_int(raw: Optional[str], name: str) -> Optional[int]:
    """Parse an integer >= 1; None when missing or malformed."""
    if raw is None or not raw.strip():
        return None
    try:
        n = int(raw.strip())
    except ValueError:
        LOG.debug("Ignoring malformed %s=%r", name, raw)
        return None
    if n < 1:
        LOG.debug("Ignoring non-positive %s=%r", name, raw)
        return None
    return n


def parse_range(raw: Optional[str], name: str = "range") -> Optional[NumericRange]:
    """
    Parse "min,max" into a (min, max) pair of floats.

    Wrong arity, empty parts and non-numeric or non-finite values give None so
    the caller skips the filter instead of failing the request.
    """
    if raw is None:
        return None
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2 or not all(parts):
        LOG.debug("Ignoring malformed %s=%r", name, raw)
        return None
    try:
        low, high = float(parts[0]), float(parts[1])
    except ValueError:
        LOG.debug("Ignoring non-numeric %s=%r", name, raw)
        return None
    if not (math.isfinite(low) and math.isfinite(high)):
        LOG.debug("Ignoring non-finite %s=%r", name, raw)
        return None
    return low, high


def parse_sort(raw: Optional[str]) -> tuple[Optional[str], bool]:
    """Return (field, descending). A leading '-' sorts descending; unknown fields give (None, False)."""
    if raw is None or not raw.strip():
        return None, False
    field = raw.strip()
    descending = field.startswith("-")
    if descending:
        field = field[1:]
    if field not in HOTEL_FIELDS:
        LOG.debug("Ignoring unknown sort field %r", raw)
        return None, False
    return field, descending


def build_hotel_query(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    sort: Optional[str] = None,
    location: Optional[str] = None,
    price: Optional[str] = None,
    rooms: Optional[str] = None,
    *,
    default_limit: int = HOTELS_DEFAULT_LIMIT,
    max_limit: int = HOTELS_MAX_LIMIT,
) -> HotelQuery:
    """Build a HotelQuery from raw query-string values. Never raises on bad input."""
    page_n = _parse_positive_int(page, "page") or 1
    limit_n = min(_parse_positive_int(limit, "limit") or default_limit, max_limit)
    sort_field, sort_descending = parse_sort(sort)
    return HotelQuery(
        location=location if location else None,
        price_range=parse_range(price, "price"),
        rooms_range=parse_range(rooms, "rooms"),
        sort_field=sort_field,
        sort_descending=sort_descending,
        skip=min((page_n - 1) * limit_n, MAX_SKIP),
        limit=limit_n,
    )
