"""
Main - Factory FastAPI.

Responsabilite unique:
----------------------
Creer et configurer l'application FastAPI.

Usage:
------
    # Development
    uvicorn src.presentation.api.main:app --reload

    # Production
    uvicorn src.presentation.api.main:app --host 0.0.0.0 --port 8000
"""

from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from src.presentation.api.config import APISettings, get_settings
from src.presentation.api.billing.router import router as billing_router
from src.presentation.api.errors import register_exception_handlers
from src.infrastructure.logging import configure_logging, get_logger
from src.infrastructure.logging.config import RequestLogger


def create_app(settings: Optional[APISettings] = None) -> FastAPI:
    """
    Factory pour creer l'application FastAPI.

    Args:
        settings: Configuration (defaut: variables d'environnement).

    Returns:
        Application FastAPI configuree.
    """
    settings = settings or get_settings()

    # Configure logging (JSON in production)
    configure_logging(json_logs=settings.is_production, log_level=settings.log_level)
    logger = get_logger("api")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Request logging middleware
    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestLogger())

    register_exception_handlers(app)

    logger.info("app_started", version=settings.api_version, env=settings.env)

    # Health check
    @app.get("/health", tags=["Health"])
    def health():
        """Endpoint de sante."""
        return {"status": "healthy"}

    # Routers
    app.include_router(billing_router, prefix=settings.api_prefix)

    return app


# Instance pour uvicorn
app = create_app()
