"""Transit information API: lines, stops, vehicles and vehicle positions."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from utils.config import CORS_ORIGINS, LOG_LEVEL, PORT, RUN_MIGRATIONS

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from api.lines import router as lines_router
from api.positions import router as positions_router
from api.routes import router
from api.stops import router as stops_router
from api.vehicles import router as vehicles_router
from utils.errors import ConflictError, NotFoundError, PersistenceError

LOG = logging.getLogger(__name__)

app = FastAPI(
    title="Transit API",
    description="Lines, stops, vehicles and vehicle positions for a public-transit information service",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
app.include_router(stops_router)
app.include_router(lines_router)
app.include_router(vehicles_router)
app.include_router(positions_router)


@app.exception_handler(NotFoundError)
@app.exception_handler(ConflictError)
async def handle_client_error(request: Request, exc: NotFoundError | ConflictError) -> JSONResponse:
    """Missing references and id collisions are reported as 400 with a message."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())


@app.exception_handler(PersistenceError)
async def handle_persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
    """Store failures (transaction already rolled back) are reported as 500 with the error detail."""
    LOG.error("%s %s failed: %s", request.method, request.url.path, exc.error)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema violations are reported as 400 with field-level details."""
    # The rejected input is left out: NaN and infinity are not valid JSON.
    errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "validation": jsonable_encoder(errors)},
    )


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations."""
    if not RUN_MIGRATIONS:
        return
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")
    LOG.info("Database migrations applied")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
