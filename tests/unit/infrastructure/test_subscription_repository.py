"""
Tests unitaires pour SqlAlchemySubscriptionRepository (SQLite en memoire).
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch

import pytest

from src.domain.entities import PaymentRecord, SubscriptionRecord
from src.infrastructure.persistence.billing import SqlAlchemySubscriptionRepository
from src.infrastructure.persistence.database import ensure_tables_exist
from src.infrastructure.persistence.models import PaymentModel, UserProfileModel


NOW = datetime(2024, 5, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def repository(db) -> SqlAlchemySubscriptionRepository:
    return SqlAlchemySubscriptionRepository(db)


def pending_records(user_id: str = "abc123", billing_id: str = "bill_1"):
    """Assinatura + pagamento en attente."""
    return (
        SubscriptionRecord.create_pending(user_id, billing_id, now=NOW),
        PaymentRecord.create_pending(user_id, billing_id, Decimal("9.90")),
    )


def count_rows(db, model) -> int:
    with db.get_session() as session:
        return session.query(model).count()


class TestRecordPending:
    """Tests pour record_pending."""

    def test_creates_both_rows(self, repository, db):
        """Premiere assinatura: insert user_profiles + pagamentos."""
        payment = repository.record_pending(*pending_records())

        assert payment.id is not None
        assert count_rows(db, UserProfileModel) == 1
        assert count_rows(db, PaymentModel) == 1

        subscription = repository.get_subscription("abc123")
        assert subscription.assinatura_id == "bill_1"
        assert subscription.assinatura_ativa is False
        assert subscription.proximo_pagamento.month == 6

    def test_upsert_overwrites_subscription(self, repository, db):
        """Deuxieme cobranca: la ligne user_profiles est ecrasee."""
        repository.record_pending(*pending_records(billing_id="bill_1"))
        repository.record_pending(*pending_records(billing_id="bill_2"))

        assert count_rows(db, UserProfileModel) == 1
        assert repository.get_subscription("abc123").assinatura_id == "bill_2"

    def test_payments_are_append_only(self, repository):
        """Chaque cobranca ajoute un pagamento, plus recent en premier."""
        repository.record_pending(*pending_records(billing_id="bill_1"))
        repository.record_pending(*pending_records(billing_id="bill_2"))

        payments = repository.find_payments("abc123")

        assert [p.assinatura_id for p in payments] == ["bill_2", "bill_1"]
        assert payments[0].valor == Decimal("9.90")
        assert payments[0].metodo_pagamento == "pix"
        assert payments[0].status == "pending"
        assert payments[0].efi_charge_id == "bill_2"

    def test_failure_writes_nothing(self, repository, db):
        """Echec de l'insert pagamento: l'upsert est annule aussi."""
        subscription, payment = pending_records()

        with patch(
            "src.infrastructure.persistence.billing.sqlalchemy_subscription_repository.PaymentModel",
            side_effect=RuntimeError("insert failed"),
        ):
            with pytest.raises(RuntimeError):
                repository.record_pending(subscription, payment)

        assert count_rows(db, UserProfileModel) == 0
        assert count_rows(db, PaymentModel) == 0


class TestReads:
    """Tests pour get_subscription et find_payments."""

    def test_unknown_user(self, repository):
        """Utilisateur sans assinatura."""
        assert repository.get_subscription("nobody") is None
        assert repository.find_payments("nobody") == []

    def test_payments_filtered_by_user(self, repository):
        """Seuls les pagamentos de l'utilisateur sont retournes."""
        repository.record_pending(*pending_records(user_id="u1", billing_id="bill_1"))
        repository.record_pending(*pending_records(user_id="u2", billing_id="bill_2"))

        assert [p.assinatura_id for p in repository.find_payments("u1")] == ["bill_1"]


class TestDatabaseManager:
    """Tests pour DatabaseManager et ensure_tables_exist."""

    def test_health_check(self, db):
        assert db.health_check() is True

    def test_ensure_tables_exist(self, db):
        assert ensure_tables_exist(db) is True

    def test_session_rolls_back_on_error(self, db):
        """Une exception dans le bloc annule la transaction."""
        with pytest.raises(ValueError):
            with db.get_session() as session:
                session.add(UserProfileModel(user_id="abc123", assinatura_ativa=False))
                session.flush()
                raise ValueError("boom")

        assert count_rows(db, UserProfileModel) == 0
