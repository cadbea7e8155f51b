"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from folio.app_context import get_app_context
from folio.config.settings import get_settings
from folio.config.logging_config import setup_logging
from folio.api.routers import assets_router, transactions_router, portfolio_router
from folio.core.exceptions import AppError, IndexOutOfRangeError, UnknownTickerError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    context = get_app_context()
    if not context.is_initialized:
        context.initialize()
    logger.info("Ledger ready (data dir: %s)", context.data_dir)
    yield
    # Shutdown (state is only written on explicit save)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal investment ledger with FIFO cost basis",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(assets_router)
app.include_router(transactions_router)
app.include_router(portfolio_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 404 if isinstance(exc, (UnknownTickerError, IndexOutOfRangeError)) else 400
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
