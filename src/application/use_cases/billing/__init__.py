"""
Billing Use Cases.

Use cases pour la facturation AbacatePay.

Use Cases:
----------
- CreateBillingUseCase: Cree la cobranca et enregistre l'assinatura en attente
"""

from src.application.use_cases.billing.create_billing import (
    CreateBillingResponse,
    CreateBillingUseCase,
)

__all__ = [
    "CreateBillingUseCase",
    "CreateBillingResponse",
]
