"""
Port BillingProvider - Interface vers le provider de paiement.

Le provider cree une cobranca et retourne une URL de paiement
hebergee vers laquelle le navigateur est redirige.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class BillingResult:
    """
    Cobranca creee par le provider.

    Attributes:
        billing_id: Identifiant opaque de la cobranca.
        redirect_url: URL de la page de paiement.
        status: Statut attribue par le provider (ex: "PENDING").
    """

    billing_id: str
    redirect_url: str
    status: Optional[str] = None


class BillingProvider(ABC):
    """
    Interface du provider de paiement.

    Implementee par AbacatePayClient.
    """

    @abstractmethod
    def create_billing(self, payload: dict[str, Any]) -> BillingResult:
        """
        Cree une cobranca.

        Args:
            payload: Corps de requete (voir BillingPayloadBuilder).

        Raises:
            ProviderCallFailedError: Reponse non 2xx ou erreur reseau.
            MalformedProviderResponseError: 2xx sans data.id / data.url.
        """
        ...
