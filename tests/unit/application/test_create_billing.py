"""
Tests unitaires pour CreateBillingUseCase.
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import Mock

import pytest

from src.application.use_cases.billing import CreateBillingUseCase
from src.domain.entities import PaymentRecord, SubscriptionRecord
from src.domain.exceptions import (
    MalformedProviderResponseError,
    PersistenceFailedError,
    ProviderCallFailedError,
)
from src.domain.ports.billing_provider import BillingProvider, BillingResult
from src.domain.ports.subscription_repository import SubscriptionRepository


FIXED_NOW = datetime(2024, 1, 31, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_provider():
    """Provider qui cree la cobranca bill_1."""
    provider = Mock(spec=BillingProvider)
    provider.create_billing.return_value = BillingResult(
        billing_id="bill_1",
        redirect_url="https://pay/bill_1",
        status="PENDING",
    )
    return provider


@pytest.fixture
def mock_repository():
    """Repository qui attribue l'id 7 au pagamento."""
    repository = Mock(spec=SubscriptionRepository)

    def record_pending(subscription, payment):
        payment.id = 7
        return payment

    repository.record_pending.side_effect = record_pending
    return repository


@pytest.fixture
def use_case(mock_provider, mock_repository):
    return CreateBillingUseCase(mock_provider, mock_repository, clock=lambda: FIXED_NOW)


class TestCreateBillingUseCase:
    """Tests pour CreateBillingUseCase."""

    def test_success_returns_redirect(self, use_case, sample_order):
        """Succes: billing_id et redirect_url du provider."""
        # Act
        response = use_case.execute(sample_order)

        # Assert
        assert response.billing_id == "bill_1"
        assert response.redirect_url == "https://pay/bill_1"
        assert response.payment.id == 7

    def test_sends_built_payload(self, use_case, mock_provider, sample_order):
        """Le provider recoit le payload en centimes."""
        use_case.execute(sample_order)

        payload = mock_provider.create_billing.call_args[0][0]
        assert payload["products"][0]["price"] == 990
        assert payload["products"][0]["externalId"] == "praxis-monthly-abc123"
        assert payload["frequency"] == "MONTHLY"

    def test_records_share_billing_id(self, use_case, mock_repository, sample_order):
        """Assinatura et pagamento portent le meme billing id."""
        use_case.execute(sample_order)

        subscription, payment = mock_repository.record_pending.call_args[0]
        assert isinstance(subscription, SubscriptionRecord)
        assert isinstance(payment, PaymentRecord)
        assert subscription.assinatura_id == "bill_1"
        assert payment.assinatura_id == "bill_1"
        assert payment.efi_charge_id == "bill_1"

    def test_subscription_is_pending_for_one_month(self, use_case, mock_repository, sample_order):
        """Assinatura inactive, prochain paiement clampe en fin de mois."""
        use_case.execute(sample_order)

        subscription, payment = mock_repository.record_pending.call_args[0]
        assert subscription.assinatura_ativa is False
        assert subscription.data_assinatura == FIXED_NOW
        assert subscription.proximo_pagamento == datetime(2024, 2, 29, 9, 0, tzinfo=timezone.utc)
        assert payment.valor == Decimal("9.90")
        assert payment.status == "pending"
        assert payment.metodo_pagamento == "pix"

    def test_provider_failure_persists_nothing(self, use_case, mock_provider, mock_repository, sample_order):
        """Echec provider: exception propagee, aucune ecriture."""
        mock_provider.create_billing.side_effect = ProviderCallFailedError(402, '{"error":"x"}')

        with pytest.raises(ProviderCallFailedError):
            use_case.execute(sample_order)

        mock_repository.record_pending.assert_not_called()

    def test_malformed_provider_response_persists_nothing(
        self, use_case, mock_provider, mock_repository, sample_order
    ):
        """Reponse sans data.url: aucune ecriture."""
        mock_provider.create_billing.side_effect = MalformedProviderResponseError("data.url")

        with pytest.raises(MalformedProviderResponseError):
            use_case.execute(sample_order)

        mock_repository.record_pending.assert_not_called()

    def test_persistence_failure_is_wrapped(self, use_case, mock_repository, sample_order):
        """Erreur base: PersistenceFailedError avec user et billing id."""
        mock_repository.record_pending.side_effect = RuntimeError("db down")

        with pytest.raises(PersistenceFailedError) as exc_info:
            use_case.execute(sample_order)

        assert exc_info.value.user_id == "abc123"
        assert exc_info.value.billing_id == "bill_1"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
