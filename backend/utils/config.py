"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "8001"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# When TESTING=true, use test DB URL so tests never touch production.
if os.environ.get("TESTING") == "true":
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./hotels.db",
    )

# Page window for GET /api/hotels when page/limit are absent or malformed.
HOTELS_DEFAULT_LIMIT = int(os.environ.get("HOTELS_DEFAULT_LIMIT", "10"))
HOTELS_MAX_LIMIT = int(os.environ.get("HOTELS_MAX_LIMIT", "100"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8080"
    ).split(",")
    if origin.strip()
]
