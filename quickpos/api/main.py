"""
HTTP entry point: builds the FastAPI app around the terminal services.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quickpos import __version__
from quickpos.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from quickpos.api.middleware.error_handler import setup_exception_handlers
from quickpos.api.routes import (
    cart_router,
    checkout_router,
    expenses_router,
    health_router,
    payments_router,
    reports_router,
    shifts_router,
    subscription_router,
    transactions_router,
)
from quickpos.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Wires the terminal's services on startup and stops any live QR
    session timers on shutdown.
    """
    from quickpos.application import services

    settings = get_settings()
    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        debug=settings.api.debug,
    )

    gate = services.get_subscription_gate()
    services.get_shift_manager()
    services.get_transaction_recorder()
    logger.info(
        "terminal_ready",
        plan=gate.current_plan,
        require_open_shift=settings.checkout.require_open_shift,
        discount_rate=settings.pricing.discount_rate,
    )

    yield

    logger.info("application_stopping")
    await services.get_qr_payment_use_case().aclose()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Build the app: logging, middleware, CORS, error handlers and routers."""
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Point-of-sale cart, shift, subscription and payment core",
        version=__version__,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(LoggingMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(cart_router)
    app.include_router(subscription_router)
    app.include_router(shifts_router)
    app.include_router(checkout_router)
    app.include_router(payments_router)
    app.include_router(reports_router)
    app.include_router(transactions_router)
    app.include_router(expenses_router)

    # Root health endpoint (for container health checks)
    @app.get("/health")
    async def root_health() -> dict[str, str]:
        return {"status": "healthy", "version": __version__}

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "quickpos.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
