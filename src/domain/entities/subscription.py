"""
Entites de facturation - Assinatura et pagamento.

SubscriptionRecord:
-------------------
Inscription de l'utilisateur au plan mensuel (table user_profiles,
une ligne par utilisateur, upsert). Creee inactive: l'activation
se fait lors de la confirmation du paiement, hors de ce flux.

PaymentRecord:
--------------
Journal append-only des tentatives de cobranca (table pagamentos).
Une ligne par cobranca creee, jamais modifiee ici.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from src.domain.value_objects.billing_cycle import BillingCycle, PaymentMethod


class PaymentStatus:
    """Constantes pour les statuts de pagamento."""

    PENDING = "pending"


def utc_now() -> datetime:
    """Horodatage UTC timezone-aware."""
    return datetime.now(timezone.utc)


@dataclass
class SubscriptionRecord:
    """
    Etat d'assinatura d'un utilisateur.

    Attributes:
        user_id: Cle (identifiant du fournisseur d'identite).
        assinatura_id: ID de la cobranca chez le provider.
        data_assinatura: Date de creation de l'assinatura.
        proximo_pagamento: Date du prochain paiement (+1 mois).
        assinatura_ativa: Toujours False a la creation.
        updated_at: Derniere modification.
    """

    user_id: str
    assinatura_id: str
    data_assinatura: datetime
    proximo_pagamento: datetime
    assinatura_ativa: bool = False
    updated_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create_pending(
        cls,
        user_id: str,
        billing_id: str,
        cycle: BillingCycle = BillingCycle.MONTHLY,
        now: Optional[datetime] = None,
    ) -> "SubscriptionRecord":
        """
        Cree une assinatura en attente de paiement.

        Args:
            user_id: ID de l'utilisateur.
            billing_id: ID de la cobranca retourne par le provider.
            cycle: Cycle de facturation.
            now: Horodatage de reference (defaut: maintenant, UTC).

        Returns:
            SubscriptionRecord inactive.
        """
        now = now or utc_now()
        return cls(
            user_id=user_id,
            assinatura_id=billing_id,
            data_assinatura=now,
            proximo_pagamento=cycle.next_charge_after(now),
            assinatura_ativa=False,
            updated_at=now,
        )


@dataclass
class PaymentRecord:
    """
    Tentative de cobranca.

    Attributes:
        user_id: ID de l'utilisateur.
        assinatura_id: ID de la cobranca (meme valeur que l'assinatura).
        efi_charge_id: Reference externe de la cobranca.
        valor: Montant en reais.
        metodo_pagamento: Moyen de paiement ("pix").
        status: Statut ("pending" a la creation).
        id: Identifiant auto-incremente (None avant insertion).
        created_at: Date de creation.
    """

    user_id: str
    assinatura_id: str
    efi_charge_id: str
    valor: Decimal
    metodo_pagamento: str = PaymentMethod.PIX.value
    status: str = PaymentStatus.PENDING
    id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create_pending(
        cls,
        user_id: str,
        billing_id: str,
        valor: Decimal,
        method: PaymentMethod = PaymentMethod.PIX,
    ) -> "PaymentRecord":
        """Cree un pagamento en attente pour une cobranca."""
        return cls(
            user_id=user_id,
            assinatura_id=billing_id,
            efi_charge_id=billing_id,
            valor=valor,
            metodo_pagamento=method.value,
            status=PaymentStatus.PENDING,
        )
