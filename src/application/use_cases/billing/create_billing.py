"""
CreateBillingUseCase - Creation d'une cobranca mensuelle.

Responsabilite unique:
----------------------
Creer la cobranca chez le provider puis enregistrer l'assinatura
en attente et le pagamento associe.

Etapes:
-------
1. Construire le payload provider (centimes, MONTHLY, PIX)
2. Appeler le provider: en cas d'echec, rien n'est persiste
3. Enregistrer assinatura (upsert) + pagamento (insert) en une transaction

Dependances:
------------
- BillingProvider: Creation de la cobranca
- SubscriptionRepository: Persistance locale
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from src.domain.entities.subscription import (
    PaymentRecord,
    SubscriptionRecord,
    utc_now,
)
from src.domain.exceptions import (
    MalformedProviderResponseError,
    PersistenceFailedError,
    ProviderCallFailedError,
)
from src.domain.ports.billing_provider import BillingProvider
from src.domain.ports.subscription_repository import SubscriptionRepository
from src.domain.services.billing_payload import BillingOrder, BillingPayloadBuilder
from src.infrastructure.logging import get_logger


@dataclass
class CreateBillingResponse:
    """
    Reponse de creation.

    Attributes:
        billing_id: ID de la cobranca chez le provider.
        redirect_url: URL de paiement hebergee.
        subscription: Assinatura enregistree.
        payment: Pagamento enregistre.
    """

    billing_id: str
    redirect_url: str
    subscription: SubscriptionRecord
    payment: PaymentRecord


class CreateBillingUseCase:
    """
    Use case de creation de cobranca.

    Example:
        >>> use_case = CreateBillingUseCase(provider, repo)
        >>> response = use_case.execute(order)
        >>> response.redirect_url
        'https://pay/bill_1'
    """

    def __init__(
        self,
        provider: BillingProvider,
        repository: SubscriptionRepository,
        payload_builder: Optional[BillingPayloadBuilder] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialise le use case.

        Args:
            provider: Provider de paiement.
            repository: Repository assinaturas/pagamentos.
            payload_builder: Constructeur de payload (defaut: plan PRAXIS).
            clock: Source de l'horodatage (injectable pour les tests).
        """
        self._provider = provider
        self._repository = repository
        self._payload_builder = payload_builder or BillingPayloadBuilder()
        self._clock = clock
        self._logger = get_logger("billing.create")

    def execute(self, order: BillingOrder) -> CreateBillingResponse:
        """
        Execute la creation.

        Args:
            order: Commande validee.

        Returns:
            CreateBillingResponse.

        Raises:
            ProviderCallFailedError: Le provider a refuse la cobranca.
            MalformedProviderResponseError: Reponse provider incomplete.
            PersistenceFailedError: Cobranca creee mais ecriture locale echouee.
        """
        log = self._logger.bind(user_id=order.user_id)
        log.info(
            "billing_requested",
            amount=str(order.amount.amount),
            external_id=order.external_id,
        )

        payload = self._payload_builder.build(order)

        try:
            result = self._provider.create_billing(payload)
        except ProviderCallFailedError as e:
            log.error(
                "provider_call_failed",
                status_code=e.status_code,
                provider_body=e.body,
            )
            raise
        except MalformedProviderResponseError as e:
            log.error("provider_response_malformed", missing=e.missing)
            raise

        log = log.bind(billing_id=result.billing_id)
        log.info("provider_billing_created", provider_status=result.status)

        subscription = SubscriptionRecord.create_pending(
            user_id=order.user_id,
            billing_id=result.billing_id,
            cycle=order.cycle,
            now=self._clock(),
        )
        payment = PaymentRecord.create_pending(
            user_id=order.user_id,
            billing_id=result.billing_id,
            valor=order.amount.quantized(),
            method=order.methods[0],
        )

        try:
            payment = self._repository.record_pending(subscription, payment)
        except Exception as e:
            # La cobranca existe chez le provider sans trace locale
            log.error(
                "billing_persistence_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise PersistenceFailedError(
                order.user_id, result.billing_id, type(e).__name__
            ) from e

        log.info("billing_persisted", payment_id=payment.id)

        return CreateBillingResponse(
            billing_id=result.billing_id,
            redirect_url=result.redirect_url,
            subscription=subscription,
            payment=payment,
        )
