import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import config
from core.db import DatabasePool, DatabasePoolError
from names import errors
from names import router as names_router
from names.migrate import ensure_schema

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process; handlers reach it through app.state.
    pool = DatabasePool(config.database_settings())
    await pool.initialize()
    try:
        await ensure_schema(pool)
        app.state.pool = pool
        yield
    finally:
        app.state.pool = None
        await pool.shutdown()


app = FastAPI(lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(names_router.router, tags=["names"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(errors.ValidationError)
async def handle_validation_error(_: Request, exc: errors.ValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    message = f"Invalid or missing fields: {', '.join(fields)}." if fields else "Invalid request."
    return _error(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(errors.PersistenceError)
async def handle_persistence_error(request: Request, exc: errors.PersistenceError) -> JSONResponse:
    logger.error("persistence_failed path=%s detail=%s", request.url.path, exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


@app.exception_handler(DatabasePoolError)
async def handle_pool_error(request: Request, exc: DatabasePoolError) -> JSONResponse:
    logger.error("db_pool_unavailable path=%s detail=%s", request.url.path, exc)
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, _: Exception) -> JSONResponse:
    logger.exception("request_failed path=%s", request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error.")


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


def run() -> None:
    logging.basicConfig(level=config.log_level())
    uvicorn.run(app, host="0.0.0.0", port=config.listen_port())


if __name__ == "__main__":
    run()
