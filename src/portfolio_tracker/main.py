"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from portfolio_tracker import __version__
from portfolio_tracker.app_context import get_app_context
from portfolio_tracker.config.settings import get_settings
from portfolio_tracker.config.logging_config import setup_logging
from portfolio_tracker.api.routers import quote_router, holdings_router, portfolio_router
from portfolio_tracker.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    context = get_app_context()
    if not context.is_initialized:
        context.initialize()
    if context.settings.polling_enabled:
        context.start_polling()
    yield
    # Shutdown
    await context.close()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Local-first stock portfolio tracker with live quotes",
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(quote_router)
app.include_router(holdings_router)
app.include_router(portfolio_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code},
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
        "version": __version__,
        "docs": "/docs",
    }
