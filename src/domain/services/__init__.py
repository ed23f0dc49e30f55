"""
Services du domaine.

Les services du domaine contiennent la logique metier
qui n'appartient pas naturellement a une entite specifique.
Ils sont purs et n'ont aucune dependance externe.
"""

from src.domain.services.billing_payload import (
    BillingCustomer,
    BillingOrder,
    BillingPayloadBuilder,
    build_external_id,
)

__all__ = [
    "BillingCustomer",
    "BillingOrder",
    "BillingPayloadBuilder",
    "build_external_id",
]
