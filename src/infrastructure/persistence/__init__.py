"""
Adapters pour la persistence des donnees.

Ce module expose le repository de facturation et le DatabaseManager
pour l'architecture hexagonale.
"""

from src.infrastructure.persistence.models import (
    Base,
    PaymentModel,
    UserProfileModel,
)
from src.infrastructure.persistence.database import (
    DatabaseManager,
    ensure_tables_exist,
)
from src.infrastructure.persistence.billing import SqlAlchemySubscriptionRepository

__all__ = [
    "Base",
    "DatabaseManager",
    "ensure_tables_exist",
    "UserProfileModel",
    "PaymentModel",
    "SqlAlchemySubscriptionRepository",
]
