"""
View Models - Modeles de vue pour la presentation.

Les View Models encapsulent la logique de presentation
et fournissent des donnees formatees pour l'interface utilisateur.
"""

from src.presentation.view_models.subscription_view_model import (
    BillingApiClient,
    SubscriptionOutcome,
    SubscriptionViewModel,
)

__all__ = [
    "BillingApiClient",
    "SubscriptionOutcome",
    "SubscriptionViewModel",
]
