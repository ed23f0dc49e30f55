"""
Value Objects du domaine.

Les Value Objects sont des objets immuables qui encapsulent
des valeurs avec leur logique de validation.

Caracteristiques:
    - Immuables (frozen dataclasses)
    - Valides par construction
    - Comparaison par valeur
    - Aucun identifiant propre
"""

from src.domain.value_objects.billing_cycle import BillingCycle, PaymentMethod
from src.domain.value_objects.cpf import CPF_PLACEHOLDER, Cpf
from src.domain.value_objects.money import Money

__all__ = [
    "Money",
    "Cpf",
    "CPF_PLACEHOLDER",
    "BillingCycle",
    "PaymentMethod",
]
