"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir les dependances (repos, services) aux endpoints.

Usage:
------
    @router.post("/create-abacatepay-billing")
    def create(user_id: str = Depends(get_current_user_id)):
        ...
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.application.use_cases.billing import CreateBillingUseCase
from src.domain.exceptions import UnauthenticatedError
from src.domain.ports.billing_provider import BillingProvider
from src.domain.ports.subscription_repository import SubscriptionRepository
from src.infrastructure.external_services import AbacatePayClient
from src.infrastructure.persistence.billing import SqlAlchemySubscriptionRepository
from src.infrastructure.persistence.database import DatabaseManager
from src.presentation.api.auth.jwt_service import JWTService, TokenPayload
from src.presentation.api.config import APISettings, get_settings


# Security scheme
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def _database_for(database_url: str) -> DatabaseManager:
    """Un seul engine (et son pool) par URL."""
    return DatabaseManager(database_url)


def get_db(settings: APISettings = Depends(get_settings)) -> DatabaseManager:
    """Retourne le DatabaseManager."""
    return _database_for(settings.database_url)


def get_subscription_repository(
    db: DatabaseManager = Depends(get_db),
) -> SubscriptionRepository:
    """Retourne le SubscriptionRepository."""
    return SqlAlchemySubscriptionRepository(db)


def get_billing_provider(
    settings: APISettings = Depends(get_settings),
) -> BillingProvider:
    """Retourne le client AbacatePay."""
    return AbacatePayClient(
        api_token=settings.abacatepay_api_token,
        base_url=settings.abacatepay_base_url,
        timeout=settings.abacatepay_timeout_seconds,
    )


def get_create_billing_use_case(
    provider: BillingProvider = Depends(get_billing_provider),
    repository: SubscriptionRepository = Depends(get_subscription_repository),
) -> CreateBillingUseCase:
    """Retourne le CreateBillingUseCase."""
    return CreateBillingUseCase(provider, repository)


def get_jwt_service(
    settings: APISettings = Depends(get_settings)
) -> JWTService:
    """Retourne le JWTService."""
    return JWTService(settings)


def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> Optional[TokenPayload]:
    """
    Extrait le payload du token JWT.

    Returns:
        TokenPayload si token valide, None sinon.
    """
    if not credentials:
        return None

    return jwt_service.verify_access_token(credentials.credentials)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    payload: Optional[TokenPayload] = Depends(get_token_payload),
) -> str:
    """
    Retourne l'ID de l'utilisateur authentifie.

    Raises:
        UnauthenticatedError: Token absent, invalide ou expire.
    """
    if not credentials:
        raise UnauthenticatedError("Token d'acces manquant")
    if not payload:
        raise UnauthenticatedError("Token invalide ou expire")
    return payload.user_id
