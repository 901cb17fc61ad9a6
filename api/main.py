"""
FastAPI application initialization
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from api.routes import info, elements
from api.middleware import EdgeMiddleware, RequestContextMiddleware
from core.cache import build_response_cache
from core.config import settings
from core.database import engine
from core.exceptions import PeriodicTableError
from core.logging import setup_logging
from schemas.api import ErrorResponse
import logging

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("Starting Periodic Table API")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Database: {settings.DATABASE_URL.split('@')[1] if '@' in settings.DATABASE_URL else 'configured'}")
    try:
        yield
    finally:
        logger.info("Shutting down Periodic Table API")
        await engine.dispose()


# Create FastAPI app
app = FastAPI(
    title=settings.API_NAME,
    description="Read-only periodic table data with an edge response cache",
    version=settings.API_VERSION,
    lifespan=lifespan,
    # "/elements/" is a different path from "/elements" and resolves to 404
    redirect_slashes=False,
)

app.state.response_cache = build_response_cache()

# Outermost last: request context wraps the edge behaviour
app.add_middleware(EdgeMiddleware)
app.add_middleware(RequestContextMiddleware)

# Resolution order: info, static element listings, collection, lookups
app.include_router(info.router)
app.include_router(elements.router)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(PeriodicTableError)
async def periodic_table_error_handler(request: Request, exc: PeriodicTableError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return error_response(exc.status_code, exc.client_message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods are both reported as not found
    if exc.status_code in (404, 405):
        return error_response(404, "Not found")
    return error_response(exc.status_code, str(exc.detail))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)
