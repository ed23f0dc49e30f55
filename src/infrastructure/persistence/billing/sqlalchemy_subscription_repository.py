"""
SqlAlchemySubscriptionRepository - Adapter SQLAlchemy pour la facturation.

Implemente le port SubscriptionRepository avec SQLAlchemy.
Responsabilite unique: ecrire/lire assinaturas et pagamentos.

L'upsert de user_profiles et l'insert dans pagamentos partagent
la meme session: un echec de l'un annule l'autre.
"""

from typing import List, Optional

from src.domain.entities.subscription import PaymentRecord, SubscriptionRecord
from src.domain.ports.subscription_repository import SubscriptionRepository
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.models import PaymentModel, UserProfileModel


class SqlAlchemySubscriptionRepository(SubscriptionRepository):
    """
    Repository SQLAlchemy pour les assinaturas.

    Attributes:
        db: DatabaseManager pour les sessions.
    """

    def __init__(self, db: DatabaseManager):
        """
        Initialise le repository.

        Args:
            db: Instance DatabaseManager.
        """
        self._db = db

    def record_pending(
        self,
        subscription: SubscriptionRecord,
        payment: PaymentRecord,
    ) -> PaymentRecord:
        """
        Upsert de l'assinatura et insertion du pagamento.

        Args:
            subscription: Assinatura a creer ou ecraser.
            payment: Pagamento a ajouter.

        Returns:
            PaymentRecord avec son id.
        """
        with self._db.get_session() as session:
            existing = session.get(UserProfileModel, subscription.user_id)

            if existing:
                # Update
                existing.assinatura_id = subscription.assinatura_id
                existing.data_assinatura = subscription.data_assinatura
                existing.proximo_pagamento = subscription.proximo_pagamento
                existing.assinatura_ativa = subscription.assinatura_ativa
                existing.updated_at = subscription.updated_at
            else:
                # Create
                session.add(UserProfileModel(
                    user_id=subscription.user_id,
                    assinatura_id=subscription.assinatura_id,
                    data_assinatura=subscription.data_assinatura,
                    proximo_pagamento=subscription.proximo_pagamento,
                    assinatura_ativa=subscription.assinatura_ativa,
                    updated_at=subscription.updated_at,
                ))

            model = PaymentModel(
                user_id=payment.user_id,
                assinatura_id=payment.assinatura_id,
                efi_charge_id=payment.efi_charge_id,
                valor=payment.valor,
                metodo_pagamento=payment.metodo_pagamento,
                status=payment.status,
                created_at=payment.created_at,
            )
            session.add(model)
            session.flush()
            payment.id = model.id

        return payment

    def get_subscription(self, user_id: str) -> Optional[SubscriptionRecord]:
        """Recupere l'assinatura d'un utilisateur."""
        with self._db.get_session() as session:
            model = session.get(UserProfileModel, user_id)
            if not model or not model.assinatura_id:
                return None
            return self._to_subscription(model)

    def find_payments(self, user_id: str) -> List[PaymentRecord]:
        """Liste les pagamentos d'un utilisateur (plus recent en premier)."""
        with self._db.get_session() as session:
            models = (
                session.query(PaymentModel)
                .filter(PaymentModel.user_id == user_id)
                .order_by(PaymentModel.id.desc())
                .all()
            )
            return [self._to_payment(m) for m in models]

    def _to_subscription(self, model: UserProfileModel) -> SubscriptionRecord:
        """Convertit un model en entite."""
        return SubscriptionRecord(
            user_id=model.user_id,
            assinatura_id=model.assinatura_id,
            data_assinatura=model.data_assinatura,
            proximo_pagamento=model.proximo_pagamento,
            assinatura_ativa=model.assinatura_ativa,
            updated_at=model.updated_at,
        )

    def _to_payment(self, model: PaymentModel) -> PaymentRecord:
        """Convertit un model en entite."""
        return PaymentRecord(
            id=model.id,
            user_id=model.user_id,
            assinatura_id=model.assinatura_id,
            efi_charge_id=model.efi_charge_id,
            valor=model.valor,
            metodo_pagamento=model.metodo_pagamento,
            status=model.status,
            created_at=model.created_at,
        )
