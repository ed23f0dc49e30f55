"""
Ports du domaine (Hexagonal Architecture).

Les Ports sont des interfaces qui definissent les contrats
entre le domaine et le monde exterieur.

Ports disponibles:
------------------
- BillingProvider: Creation de cobranca chez le provider (AbacatePay)
- SubscriptionRepository: Persistance assinatura + pagamento

Pattern:
--------
Les Ports sont des abstractions (ABC) implementees
par des Adapters dans la couche Infrastructure.
"""

from src.domain.ports.billing_provider import BillingProvider, BillingResult
from src.domain.ports.subscription_repository import SubscriptionRepository

__all__ = [
    "BillingProvider",
    "BillingResult",
    "SubscriptionRepository",
]
