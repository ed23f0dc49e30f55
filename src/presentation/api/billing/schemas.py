"""
Billing Schemas - Modeles Pydantic pour la facturation.

Responsabilite unique:
----------------------
Definir et valider les schemas de requete/reponse des endpoints billing.
Une requete mal formee est rejetee avant tout appel au provider.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.exceptions import InvalidAmountError, InvalidCpfError
from src.domain.services.billing_payload import BillingCustomer, BillingOrder
from src.domain.value_objects import Cpf, Money


EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserData(BaseModel):
    """Donnees client transmises au provider."""

    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    cpf: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name ne peut pas etre vide")
        return value

    @field_validator("cpf")
    @classmethod
    def normalize_cpf(cls, value: str) -> str:
        try:
            return Cpf.parse(value).value
        except InvalidCpfError as e:
            raise ValueError(e.message) from e


class BillingRequest(BaseModel):
    """
    Requete de creation de cobranca.

    Example:
        {
            "user_id": "abc123",
            "user_data": {"name": "Maria Silva", "email": "maria@x.com",
                          "cpf": "00000000000"},
            "amount": 9.90,
            "description": "Assinatura mensal PRAXIS"
        }
    """

    model_config = ConfigDict(extra="ignore")

    user_id: str = Field(..., min_length=1, max_length=64)
    user_data: UserData
    amount: Decimal = Field(..., gt=0, le=Decimal("100000"))
    description: str = Field(..., min_length=1, max_length=255)

    @field_validator("amount", mode="before")
    @classmethod
    def amount_from_float_repr(cls, value: Any) -> Any:
        """9.905 (float JSON) -> Decimal("9.905"), pas sa valeur binaire."""
        if isinstance(value, bool):
            raise ValueError("amount doit etre un nombre")
        if isinstance(value, float):
            return Decimal(str(value))
        return value

    @field_validator("amount")
    @classmethod
    def amount_at_least_one_cent(cls, value: Decimal) -> Decimal:
        """0.001 arrondit a 0 centime: refuse avant l'appel au provider."""
        try:
            Money.from_any(value)
        except InvalidAmountError as e:
            raise ValueError(e.message) from e
        return value

    def to_order(self, allow_placeholder_tax_id: bool = True) -> BillingOrder:
        """
        Convertit en commande du domaine.

        Raises:
            InvalidCpfError: CPF placeholder refuse.
        """
        return BillingOrder(
            user_id=self.user_id,
            customer=BillingCustomer(
                name=self.user_data.name,
                email=self.user_data.email,
                tax_id=Cpf.parse(
                    self.user_data.cpf,
                    allow_placeholder=allow_placeholder_tax_id,
                ),
            ),
            amount=Money.from_any(self.amount),
            description=self.description,
        )


class CreateBillingResponse(BaseModel):
    """Reponse avec l'URL de paiement AbacatePay."""

    success: bool = True
    billing_id: str
    redirect_url: str
    message: str


class ErrorResponse(BaseModel):
    """Reponse d'erreur standardisee."""

    error: str
    message: str


class SubscriptionStatus(str, Enum):
    """Statuts d'assinatura."""

    ACTIVE = "active"
    PENDING = "pending"
    NONE = "none"


class PaymentResponse(BaseModel):
    """Ligne de l'historique des pagamentos."""

    model_config = ConfigDict(from_attributes=True)

    assinatura_id: str
    valor: Decimal
    metodo_pagamento: str
    status: str
    created_at: datetime


class SubscriptionResponse(BaseModel):
    """Statut de l'assinatura de l'utilisateur."""

    status: SubscriptionStatus
    assinatura_id: Optional[str] = None
    data_assinatura: Optional[datetime] = None
    proximo_pagamento: Optional[datetime] = None
    assinatura_ativa: bool = False
    pagamentos: list[PaymentResponse] = Field(default_factory=list)
