"""
Modeles SQLAlchemy - exports centralises.

Organisation par domaine:
- base: Base declarative
- billing_models: Assinaturas (user_profiles) et pagamentos
"""

from src.infrastructure.persistence.models.base import Base

from src.infrastructure.persistence.models.billing_models import (
    PaymentModel,
    UserProfileModel,
)

__all__ = [
    "Base",
    "UserProfileModel",
    "PaymentModel",
]
