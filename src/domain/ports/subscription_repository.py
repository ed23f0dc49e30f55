"""
Port SubscriptionRepository - Interface pour la persistance de facturation.

Definit le contrat que doivent implementer les adapters de
persistance pour les assinaturas et pagamentos.

Responsabilite unique:
----------------------
Enregistrer l'assinatura en attente et le pagamento associe.

Atomicite:
----------
`record_pending` ecrit les deux lignes dans une meme transaction:
soit les deux existent, soit aucune.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.subscription import PaymentRecord, SubscriptionRecord


class SubscriptionRepository(ABC):
    """
    Interface Repository pour les assinaturas.

    Implementee par SqlAlchemySubscriptionRepository.
    """

    @abstractmethod
    def record_pending(
        self,
        subscription: SubscriptionRecord,
        payment: PaymentRecord,
    ) -> PaymentRecord:
        """
        Upsert de l'assinatura et insertion du pagamento (atomique).

        Returns:
            PaymentRecord avec son id attribue.
        """
        ...

    @abstractmethod
    def get_subscription(self, user_id: str) -> Optional[SubscriptionRecord]:
        """Recupere l'assinatura d'un utilisateur."""
        ...

    @abstractmethod
    def find_payments(self, user_id: str) -> List[PaymentRecord]:
        """Liste les pagamentos d'un utilisateur (plus recent en premier)."""
        ...
