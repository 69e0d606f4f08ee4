"""FastAPI application main entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from apps.api import deps
from apps.api.v1.endpoints import checkout
from checkout.infrastructure.bus import RedisStreamPublisher
from checkout.infrastructure.database.config import close_database, init_database
from checkout.infrastructure.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open and close the configured backends."""
    settings = deps.get_settings()
    configure_logging(settings.checkout.log_level)

    use_sql = settings.checkout.repository_backend == "sql"
    if use_sql:
        await init_database(settings.database)

    try:
        yield
    finally:
        await _close_publisher()
        if use_sql:
            await close_database()


async def _close_publisher() -> None:
    publisher = deps._event_publisher
    if isinstance(publisher, RedisStreamPublisher):
        await publisher.disconnect()


app = FastAPI(
    title="Checkout API",
    description="Checkout orchestration for pending orders",
    version="1.0.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(checkout.router, prefix="/api/v1")


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Args:
        request: FastAPI request
        exc: Exception

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
