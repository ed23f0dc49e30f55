"""
Tests unitaires pour SubscriptionViewModel et BillingApiClient.
"""

import json
import threading
from unittest.mock import Mock

import httpx
import pytest

from src.domain.entities.user import User
from src.domain.exceptions import MalformedResponseError, SubscriptionInitiationFailedError
from src.presentation.view_models.subscription_view_model import (
    GENERIC_ERROR_MESSAGE,
    LOGIN_REQUIRED_MESSAGE,
    PLAN_DESCRIPTION,
    BillingApiClient,
    SubscriptionViewModel,
)


ENDPOINT = "https://api.praxis.test/api/v1/billing/create-abacatepay-billing"

SUCCESS_BODY = {
    "success": True,
    "billing_id": "bill_1",
    "redirect_url": "https://pay/bill_1",
    "message": "Cobrança criada com sucesso",
}


@pytest.fixture
def handler_calls() -> list:
    return []


@pytest.fixture
def api_client_factory(handler_calls):
    """Factory de BillingApiClient branche sur un faux handler."""
    def factory(status_code=200, body=SUCCESS_BODY, raw=None):
        def handler(request: httpx.Request) -> httpx.Response:
            handler_calls.append(request)
            if raw is not None:
                return httpx.Response(status_code, text=raw)
            return httpx.Response(status_code, json=body)

        return BillingApiClient(
            ENDPOINT, http_client=httpx.Client(transport=httpx.MockTransport(handler))
        )

    return factory


class TestBuildBillingRequest:
    """Tests pour build_billing_request."""

    def test_full_profile(self):
        user = User(id="abc123", email="maria@x.com", full_name="Maria Silva", cpf="12345678909")

        body = SubscriptionViewModel.build_billing_request(user)

        assert body == {
            "user_id": "abc123",
            "user_data": {"name": "Maria Silva", "email": "maria@x.com", "cpf": "12345678909"},
            "amount": 9.90,
            "description": PLAN_DESCRIPTION,
        }

    def test_defaults_without_metadata(self):
        """Sans nom: partie locale de l'email; sans CPF: sentinelle."""
        body = SubscriptionViewModel.build_billing_request(User(id="abc123", email="joao@x.com"))

        assert body["user_data"]["name"] == "joao"
        assert body["user_data"]["cpf"] == "00000000000"


class TestSubscribe:
    """Tests pour subscribe."""

    def test_no_user_requires_login(self, api_client_factory, handler_calls):
        """Pas de session: message de connexion, aucun appel reseau."""
        vm = SubscriptionViewModel(api_client_factory(), login_url="/auth/login")

        outcome = vm.subscribe(None)

        assert outcome.success is False
        assert outcome.requires_login is True
        assert outcome.message == LOGIN_REQUIRED_MESSAGE
        assert outcome.redirect_url == "/auth/login"
        assert handler_calls == []

    def test_user_without_token_requires_login(self, api_client_factory, handler_calls):
        vm = SubscriptionViewModel(api_client_factory())

        outcome = vm.subscribe(User(id="abc123", email="maria@x.com"))

        assert outcome.requires_login is True
        assert handler_calls == []

    def test_success_redirects(self, api_client_factory, handler_calls, sample_user):
        """Succes: redirect_url du handler, une seule requete."""
        vm = SubscriptionViewModel(api_client_factory())

        outcome = vm.subscribe(sample_user)

        assert outcome.success is True
        assert outcome.redirect_url == "https://pay/bill_1"
        assert outcome.billing_id == "bill_1"
        assert len(handler_calls) == 1

    def test_request_carries_token_and_body(self, api_client_factory, handler_calls, sample_user):
        """Bearer = token de session, jamais l'ID brut."""
        SubscriptionViewModel(api_client_factory()).subscribe(sample_user)

        request = handler_calls[0]
        assert request.method == "POST"
        assert str(request.url) == ENDPOINT
        assert request.headers["Authorization"] == "Bearer token-abc123"
        assert json.loads(request.content)["user_id"] == "abc123"

    @pytest.mark.parametrize(
        "status_code, body, raw",
        [
            (500, {"error": "Falha ao criar cobrança"}, None),
            (401, {"error": "x"}, None),
            (200, None, "<html>oops</html>"),
            (200, {"success": False, "redirect_url": "https://pay/x"}, None),
            (200, {"success": True}, None),
            (200, {"success": True, "redirect_url": ""}, None),
        ],
    )
    def test_failures_show_generic_error(self, api_client_factory, sample_user, status_code, body, raw):
        """Toute reponse inexploitable: message d'erreur, pas de redirection."""
        vm = SubscriptionViewModel(api_client_factory(status_code, body, raw))

        outcome = vm.subscribe(sample_user)

        assert outcome.success is False
        assert outcome.redirect_url is None
        assert outcome.message == GENERIC_ERROR_MESSAGE
        assert vm.is_busy is False

    def test_transport_error(self, sample_user):
        """Erreur reseau: message d'erreur."""
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = BillingApiClient(ENDPOINT, http_client=httpx.Client(transport=httpx.MockTransport(handler)))

        outcome = SubscriptionViewModel(client).subscribe(sample_user)

        assert outcome.success is False
        assert outcome.message == GENERIC_ERROR_MESSAGE

    def test_invalid_endpoint_url(self, sample_user):
        """BILLING_ENDPOINT_URL mal configuree: message d'erreur, pas de crash."""
        http_client = Mock(spec=httpx.Client)
        http_client.post.side_effect = httpx.InvalidURL("Invalid port: 'abc'")
        vm = SubscriptionViewModel(BillingApiClient("http://api:abc/billing", http_client=http_client))

        outcome = vm.subscribe(sample_user)

        assert outcome.success is False
        assert outcome.redirect_url is None
        assert outcome.message == GENERIC_ERROR_MESSAGE
        assert vm.is_busy is False


class TestBusyGuard:
    """Tests pour la garde anti double clic."""

    def test_second_call_refused_while_busy(self, sample_user):
        """Pendant une requete, un second subscribe est refuse sans appel."""
        started = threading.Event()
        release = threading.Event()
        api_client = Mock(spec=BillingApiClient)

        def slow_create(access_token, body):
            started.set()
            release.wait(timeout=5)
            return SUCCESS_BODY

        api_client.create_billing.side_effect = slow_create
        vm = SubscriptionViewModel(api_client)
        results = []

        worker = threading.Thread(target=lambda: results.append(vm.subscribe(sample_user)))
        worker.start()
        started.wait(timeout=5)

        assert vm.is_busy is True
        second = vm.subscribe(sample_user)

        release.set()
        worker.join(timeout=5)

        assert second.busy is True
        assert second.success is False
        assert api_client.create_billing.call_count == 1
        assert results[0].success is True
        assert vm.is_busy is False


class TestBillingApiClient:
    """Tests pour BillingApiClient."""

    def test_returns_json(self, api_client_factory):
        assert api_client_factory().create_billing("tok", {}) == SUCCESS_BODY

    def test_http_error_raises(self, api_client_factory):
        with pytest.raises(SubscriptionInitiationFailedError) as exc_info:
            api_client_factory(500, {"error": "x"}).create_billing("tok", {})
        assert "500" in exc_info.value.reason

    def test_missing_redirect_raises_malformed(self, api_client_factory):
        with pytest.raises(MalformedResponseError) as exc_info:
            api_client_factory(200, {"success": True}).create_billing("tok", {})
        assert exc_info.value.missing == "redirect_url"
