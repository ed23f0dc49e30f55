"""
Domain Layer - Coeur metier de l'application.

Ce module contient:
    - entities/: Entites du domaine (User, SubscriptionRecord, PaymentRecord)
    - value_objects/: Objets valeur immuables (Money, Cpf, BillingCycle)
    - services/: Services metier purs (construction du payload de cobranca)
    - ports/: Interfaces vers le provider et la persistance
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Logique metier pure
    - Testable sans infrastructure
"""

from src.domain.exceptions import (
    DomainException,
    InvalidBillingRequestError,
    InvalidCpfError,
    PersistenceFailedError,
    ProviderCallFailedError,
)

__all__ = [
    "DomainException",
    "InvalidBillingRequestError",
    "InvalidCpfError",
    "ProviderCallFailedError",
    "PersistenceFailedError",
]
