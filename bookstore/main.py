"""
Main FastAPI application entry point.

Wires the trace middleware, RFC 7807 exception handlers and the v1
routers. The lifespan starts the event bus worker for deferred delivery
and releases database connections on shutdown.

Run:
    uvicorn bookstore.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from bookstore.core.config import settings
from bookstore.core.container import get_database, get_event_bus, get_logger
from bookstore.presentation.api.middleware.trace_middleware import TraceMiddleware
from bookstore.presentation.api.v1 import v1_router
from bookstore.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: start event bus worker
    - Shutdown: drain queued events, close database engine
    """
    logger = get_logger()
    event_bus = get_event_bus()
    event_bus.start()
    logger.info(
        "application_started",
        app_name=settings.app_name,
        environment=settings.environment.value,
    )

    yield

    await event_bus.stop()
    await get_database().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Book catalog: listing, search, ratings and account notifications",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health")
async def health() -> JSONResponse:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        JSONResponse: 200 when the database answers, 503 otherwise.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy"})
    return JSONResponse(
        status_code=503,
        content={"status": "unhealthy", "database": "unreachable"},
    )
