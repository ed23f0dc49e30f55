"""
Entites du domaine.

Entites principales:
    - User: Utilisateur authentifie (identite externe, lecture seule)
    - SubscriptionRecord: Assinatura d'un utilisateur (une par utilisateur)
    - PaymentRecord: Tentative de cobranca (append-only)
"""

from src.domain.entities.subscription import (
    PaymentRecord,
    PaymentStatus,
    SubscriptionRecord,
)
from src.domain.entities.user import User

__all__ = [
    "User",
    "SubscriptionRecord",
    "PaymentRecord",
    "PaymentStatus",
]
