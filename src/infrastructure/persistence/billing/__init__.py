"""Adapters SQLAlchemy pour la facturation."""

from src.infrastructure.persistence.billing.sqlalchemy_subscription_repository import (
    SqlAlchemySubscriptionRepository,
)

__all__ = ["SqlAlchemySubscriptionRepository"]
