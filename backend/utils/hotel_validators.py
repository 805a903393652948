"""Validate hotel payloads for create and update."""
import math
from typing import Any

INVALID_HOTEL_MESSAGE = "All fields are required and must be valid"

# Upper bound of the rooms INTEGER column.
MAX_ROOMS = 2**31 - 1


def _get_str(payload: dict[str, Any], key: str) -> str | None:
    """Get string value; empty or whitespace-only treated as missing."""
    v = payload.get(key)
    if not isinstance(v, str):
        return None
    s = v.strip()
    return s if s else None


def _get_positive_float(payload: dict[str, Any], key: str) -> float | None:
    """Get a finite number > 0; numeric strings are coerced. None if missing or invalid."""
    v = payload.get(key)
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, str) and not v.strip():
        return None
    try:
        n = float(v)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(n) or n <= 0:
        return None
    return n


def _get_positive_int(payload: dict[str, Any], key: str) -> int | None:
    """Get an integer in 1..MAX_ROOMS; integral floats and numeric strings are accepted."""
    n = _get_positive_float(payload, key)
    if n is None or not n.is_integer() or n > MAX_ROOMS:
        return None
    return int(n)


def validate_hotel_payload(payload: Any) -> tuple[bool, dict[str, Any] | None, str]:
    """
    Validate a hotel body. Returns (ok, normalized_dict, error_message).

    Every failure collapses into INVALID_HOTEL_MESSAGE. normalized_dict has
    name, location (stripped), price (float) and rooms (int).
    """
    if not isinstance(payload, dict):
        return False, None, INVALID_HOTEL_MESSAGE
    name = _get_str(payload, "name")
    location = _get_str(payload, "location")
    price = _get_positive_float(payload, "price")
    rooms = _get_positive_int(payload, "rooms")
    if name is None or location is None or price is None or rooms is None:
        return False, None, INVALID_HOTEL_MESSAGE

    normalized = {
        "name": name,
        "location": location,
        "price": price,
        "rooms": rooms,
    }
    return True, normalized, ""
