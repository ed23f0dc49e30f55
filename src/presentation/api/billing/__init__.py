"""
Billing API - Integration AbacatePay.

Endpoints:
----------
- POST /billing/create-abacatepay-billing: Creer la cobranca mensuelle
- GET /billing/subscription: Statut de l'assinatura
"""

from src.presentation.api.billing.router import router

__all__ = ["router"]
