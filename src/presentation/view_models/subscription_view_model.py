"""
View Model pour la page d'assinatura.

Encapsule l'appel au handler de creation de cobranca: construction
de la requete depuis la session, envoi, interpretation de la reponse.
La page n'a plus qu'a afficher le message ou rediriger.
"""

import threading
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from src.domain.exceptions import (
    MalformedResponseError,
    SubscriptionInitiationFailedError,
    UnauthenticatedError,
)
from src.domain.entities.user import User
from src.domain.value_objects import CPF_PLACEHOLDER
from src.infrastructure.logging import get_logger


PLAN_AMOUNT = 9.90
PLAN_DESCRIPTION = "Assinatura mensal PRAXIS"

LOGIN_REQUIRED_MESSAGE = "Você precisa estar logado para assinar"
GENERIC_ERROR_MESSAGE = "Erro ao processar assinatura. Tente novamente."
BUSY_MESSAGE = "Processando..."

logger = get_logger("subscription.initiator")


@dataclass
class SubscriptionOutcome:
    """
    Resultat d'une tentative d'assinatura, pret pour l'affichage.

    Attributes:
        success: True si une URL de paiement a ete obtenue.
        redirect_url: URL vers laquelle naviguer (paiement ou login).
        message: Message a afficher a l'utilisateur.
        billing_id: ID de la cobranca creee.
        requires_login: True si l'utilisateur doit se connecter.
        busy: True si une requete etait deja en cours.
    """

    success: bool
    redirect_url: Optional[str] = None
    message: Optional[str] = None
    billing_id: Optional[str] = None
    requires_login: bool = False
    busy: bool = False


class BillingApiClient:
    """
    Client HTTP du handler de creation de cobranca.

    Toute reponse inexploitable leve SubscriptionInitiationFailedError.
    Pas de retry.
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None,
    ):
        self._endpoint_url = endpoint_url
        self._timeout = timeout
        self._http_client = http_client

    def create_billing(self, access_token: str, body: dict[str, Any]) -> dict[str, Any]:
        """
        Envoie la requete de creation.

        Args:
            access_token: Token de session de l'utilisateur.
            body: Corps JSON (user_id, user_data, amount, description).

        Returns:
            Reponse JSON avec success et redirect_url.

        Raises:
            SubscriptionInitiationFailedError: Erreur transport, URL invalide ou HTTP.
            MalformedResponseError: Reponse 2xx sans success/redirect_url.
        """
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }

        try:
            if self._http_client is not None:
                response = self._http_client.post(
                    self._endpoint_url, json=body, headers=headers
                )
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.post(self._endpoint_url, json=body, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SubscriptionInitiationFailedError(
                f"erreur reseau ({type(e).__name__})"
            ) from e

        if not response.is_success:
            raise SubscriptionInitiationFailedError(f"HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError("corps JSON") from e

        if not isinstance(data, dict) or data.get("success") is not True:
            raise MalformedResponseError("success")
        if not data.get("redirect_url"):
            raise MalformedResponseError("redirect_url")
        return data


class SubscriptionViewModel:
    """
    View Model du bouton "Assinar".

    Example:
        >>> vm = SubscriptionViewModel(BillingApiClient(url), login_url="/auth/login")
        >>> outcome = vm.subscribe(user)
        >>> outcome.redirect_url
        'https://pay.abacatepay.com/bill_1'
    """

    def __init__(self, api_client: BillingApiClient, login_url: str = "/auth/login"):
        self._api_client = api_client
        self._login_url = login_url
        self._lock = threading.Lock()

    @property
    def is_busy(self) -> bool:
        """True pendant qu'une requete est en cours."""
        return self._lock.locked()

    @staticmethod
    def build_billing_request(user: User) -> dict[str, Any]:
        """Construit le corps de la requete depuis la session."""
        return {
            "user_id": user.id,
            "user_data": {
                "name": user.display_name,
                "email": user.email or "",
                "cpf": user.cpf or CPF_PLACEHOLDER,
            },
            "amount": PLAN_AMOUNT,
            "description": PLAN_DESCRIPTION,
        }

    def subscribe(self, user: Optional[User]) -> SubscriptionOutcome:
        """
        Lance l'assinatura pour l'utilisateur connecte.

        Args:
            user: Utilisateur de la session (None si deconnecte).

        Returns:
            SubscriptionOutcome a afficher.
        """
        try:
            user = self._require_user(user)
        except UnauthenticatedError as e:
            logger.info("subscription_login_required", reason=e.reason)
            return SubscriptionOutcome(
                success=False,
                redirect_url=self._login_url,
                message=LOGIN_REQUIRED_MESSAGE,
                requires_login=True,
            )

        if not self._lock.acquire(blocking=False):
            return SubscriptionOutcome(success=False, message=BUSY_MESSAGE, busy=True)

        try:
            data = self._api_client.create_billing(
                user.access_token, self.build_billing_request(user)
            )
        except SubscriptionInitiationFailedError as e:
            logger.error(
                "subscription_initiation_failed",
                user_id=user.id,
                code=e.code,
                reason=e.reason,
            )
            return SubscriptionOutcome(success=False, message=GENERIC_ERROR_MESSAGE)
        finally:
            self._lock.release()

        logger.info(
            "subscription_redirect",
            user_id=user.id,
            billing_id=data.get("billing_id"),
        )
        return SubscriptionOutcome(
            success=True,
            redirect_url=data["redirect_url"],
            message=data.get("message"),
            billing_id=data.get("billing_id"),
        )

    @staticmethod
    def _require_user(user: Optional[User]) -> User:
        if user is None:
            raise UnauthenticatedError("aucune session")
        if not user.access_token:
            raise UnauthenticatedError("session sans token")
        return user
