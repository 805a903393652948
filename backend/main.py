"""Hotel inventory service: FastAPI backend."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.config import CORS_ORIGINS, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from api.hotels import router as hotels_router
from api.routes import router

LOG = logging.getLogger(__name__)

app = FastAPI(
    title="Hotel Inventory",
    description="Create, list, filter and summarize hotels",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")
app.include_router(hotels_router, prefix="/api")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"message": ...}."""
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations."""
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")
    LOG.info("Database schema is up to date")


@app.get("/")
def root() -> dict:
    """Root info."""
    return {"service": "hotel-inventory", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    from utils.config import PORT

    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
