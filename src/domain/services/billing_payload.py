"""
Service de construction du payload de cobranca AbacatePay.

Transforme une commande interne (montant decimal, CPF, nom) en
corps de requete attendu par POST /billing/create:

    {
        "frequency": "MONTHLY",
        "methods": ["PIX"],
        "customer": {"name", "email", "taxId", "cellphone"},
        "products": [{"externalId", "name", "description",
                      "quantity": 1, "price": <centimes>}]
    }
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.value_objects.billing_cycle import BillingCycle, PaymentMethod
from src.domain.value_objects.cpf import Cpf
from src.domain.value_objects.money import Money


PRODUCT_NAME = "PRAXIS - Assinatura Mensal"
EXTERNAL_ID_PREFIX = "praxis-monthly-"


def build_external_id(user_id: str) -> str:
    """
    Identifiant produit deterministe par utilisateur.

    Example:
        >>> build_external_id("abc123")
        'praxis-monthly-abc123'
    """
    return f"{EXTERNAL_ID_PREFIX}{user_id}"


@dataclass(frozen=True)
class BillingCustomer:
    """Client transmis au provider."""

    name: str
    email: str
    tax_id: Cpf
    cellphone: str = ""


@dataclass(frozen=True)
class BillingOrder:
    """
    Commande de cobranca validee.

    Attributes:
        user_id: ID de l'utilisateur.
        customer: Donnees client.
        amount: Montant decimal.
        description: Description du produit.
        cycle: Frequence de facturation.
        methods: Moyens de paiement acceptes.
    """

    user_id: str
    customer: BillingCustomer
    amount: Money
    description: str
    cycle: BillingCycle = BillingCycle.MONTHLY
    methods: tuple[PaymentMethod, ...] = field(default=(PaymentMethod.PIX,))

    @property
    def external_id(self) -> str:
        return build_external_id(self.user_id)


class BillingPayloadBuilder:
    """
    Construit le payload provider depuis une BillingOrder.

    Example:
        >>> builder = BillingPayloadBuilder()
        >>> payload = builder.build(order)
        >>> payload["products"][0]["price"]
        990
    """

    def __init__(self, product_name: str = PRODUCT_NAME) -> None:
        self.product_name = product_name

    def build(self, order: BillingOrder) -> dict[str, Any]:
        """
        Construit le corps JSON de la requete de cobranca.

        Args:
            order: Commande validee.

        Returns:
            Dict pret a etre serialise en JSON.
        """
        return {
            "frequency": order.cycle.value,
            "methods": [method.provider_code for method in order.methods],
            "customer": {
                "name": order.customer.name,
                "email": order.customer.email,
                "taxId": order.customer.tax_id.value,
                "cellphone": order.customer.cellphone,
            },
            "products": [
                {
                    "externalId": order.external_id,
                    "name": self.product_name,
                    "description": order.description,
                    "quantity": 1,
                    "price": order.amount.to_minor_units(),
                }
            ],
        }
