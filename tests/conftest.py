"""
Configuration et fixtures pytest.
"""

import sys
from decimal import Decimal
from pathlib import Path

import httpx
import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.domain.entities.user import User
from src.domain.services.billing_payload import BillingCustomer, BillingOrder
from src.domain.value_objects import Cpf, Money
from src.infrastructure.persistence.database import DatabaseManager
from src.presentation.api.config import APISettings

TEST_JWT_SECRET = "test-secret-key-with-enough-length-for-hs256"

# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - DOMAINE
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_customer() -> BillingCustomer:
    """Client AbacatePay pour les tests."""
    return BillingCustomer(
        name="Maria Silva",
        email="maria@x.com",
        tax_id=Cpf.placeholder(),
    )


@pytest.fixture
def sample_order(sample_customer: BillingCustomer) -> BillingOrder:
    """Commande mensuelle de 9,90."""
    return BillingOrder(
        user_id="abc123",
        customer=sample_customer,
        amount=Money(Decimal("9.90")),
        description="Assinatura mensal PRAXIS",
    )


@pytest.fixture
def sample_user() -> User:
    """Utilisateur connecte avec token."""
    return User(
        id="abc123",
        email="maria@x.com",
        full_name="Maria Silva",
        access_token="token-abc123",
    )


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - INFRASTRUCTURE
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def db() -> DatabaseManager:
    """Base SQLite en memoire avec les tables creees."""
    manager = DatabaseManager("sqlite://")
    manager.create_tables()
    yield manager
    manager.engine.dispose()


@pytest.fixture
def test_settings() -> APISettings:
    """Configuration API de test."""
    return APISettings(
        jwt_secret_key=TEST_JWT_SECRET,
        database_url="sqlite://",
        abacatepay_api_token="abc_test_token",
        abacatepay_base_url="https://api.abacatepay.test/v1",
    )


@pytest.fixture
def provider_success_body() -> dict:
    """Corps de reponse AbacatePay en succes."""
    return {
        "data": {"id": "bill_1", "url": "https://pay/bill_1", "status": "PENDING"},
        "error": None,
    }


@pytest.fixture
def provider_requests() -> list:
    """Requetes recues par le faux provider."""
    return []


@pytest.fixture
def provider_http_client(provider_requests: list):
    """
    Factory de client httpx branche sur un faux AbacatePay.

    Usage:
        client = provider_http_client(200, provider_success_body)
    """
    clients = []

    def factory(status_code: int = 200, body=None) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            provider_requests.append(request)
            if isinstance(body, (dict, list)):
                return httpx.Response(status_code, json=body)
            return httpx.Response(status_code, text=body or "")

        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
