"""
AbacatePay Client - Adapter HTTP pour le provider de paiement.

Responsabilite unique:
----------------------
Appeler POST /billing/create et traduire la reponse en BillingResult.

Usage:
------
    client = AbacatePayClient(api_token="abc_...", base_url="https://api.abacatepay.com/v1")
    result = client.create_billing(payload)
    result.redirect_url  # page de paiement PIX hebergee

Reponse attendue:
-----------------
    {"data": {"id": "bill_...", "url": "https://...", "status": "PENDING"},
     "error": null}
"""

from typing import Any, Optional

import httpx

from src.domain.exceptions import (
    MalformedProviderResponseError,
    ProviderCallFailedError,
)
from src.domain.ports.billing_provider import BillingProvider, BillingResult


DEFAULT_BASE_URL = "https://api.abacatepay.com/v1"
CREATE_BILLING_PATH = "/billing/create"

# Taille max du corps d'erreur conserve dans l'exception
_MAX_ERROR_BODY = 2000


class AbacatePayClient(BillingProvider):
    """
    Client de l'API AbacatePay.

    Authentifie chaque appel avec le token secret du serveur.
    Aucun retry: un echec remonte immediatement.
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialise le client.

        Args:
            api_token: Token secret AbacatePay.
            base_url: URL de base de l'API.
            timeout: Timeout des requetes en secondes.
            http_client: Client httpx (injectable pour les tests).
        """
        self._api_token = api_token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def create_url(self) -> str:
        return f"{self._base_url}{CREATE_BILLING_PATH}"

    def create_billing(self, payload: dict[str, Any]) -> BillingResult:
        """
        Cree une cobranca.

        Args:
            payload: Corps construit par BillingPayloadBuilder.

        Returns:
            BillingResult avec id et URL de paiement.

        Raises:
            ProviderCallFailedError: HTTP non 2xx ou erreur reseau.
            MalformedProviderResponseError: data.id ou data.url absent.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_token}",
        }

        try:
            if self._http_client is not None:
                response = self._http_client.post(
                    self.create_url, json=payload, headers=headers,
                    timeout=self._timeout,
                )
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.post(
                        self.create_url, json=payload, headers=headers,
                    )
        except httpx.HTTPError as e:
            raise ProviderCallFailedError(body=f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise ProviderCallFailedError(
                status_code=response.status_code,
                body=response.text[:_MAX_ERROR_BODY],
            )

        return self._parse(response)

    def _parse(self, response: httpx.Response) -> BillingResult:
        """Extrait data.id / data.url de la reponse."""
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedProviderResponseError("data") from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise MalformedProviderResponseError("data")

        billing_id = data.get("id")
        if not billing_id:
            raise MalformedProviderResponseError("data.id")

        redirect_url = data.get("url")
        if not redirect_url:
            raise MalformedProviderResponseError("data.url")

        return BillingResult(
            billing_id=str(billing_id),
            redirect_url=str(redirect_url),
            status=data.get("status"),
        )
