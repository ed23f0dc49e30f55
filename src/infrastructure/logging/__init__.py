"""
Logging Infrastructure - Logging structure avec structlog.

Responsabilite:
---------------
Fournir un logging JSON structure pour production.

Usage:
------
    from src.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("billing_requested", user_id="abc123", amount="9.90")
"""

from src.infrastructure.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
