"""
Configuration de la page d'assinatura.

Variables:
----------
- BILLING_ENDPOINT_URL: URL du handler de creation de cobranca
- LOGIN_URL: Page de connexion (redirection si pas de session)
- BILLING_REQUEST_TIMEOUT_SECONDS: Timeout de l'appel au handler
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class CheckoutSettings(BaseSettings):
    """Configuration du client d'assinatura (cote page)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    billing_endpoint_url: str = (
        "http://localhost:8000/api/v1/billing/create-abacatepay-billing"
    )
    login_url: str = "/auth/login"
    billing_request_timeout_seconds: float = 30.0


@lru_cache
def get_checkout_settings() -> CheckoutSettings:
    """Retourne la configuration (cached)."""
    return CheckoutSettings()
