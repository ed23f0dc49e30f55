"""
Modeles SQLAlchemy pour la facturation.

Tables:
-------
- user_profiles: Assinatura par utilisateur (cle: user_id, upsert)
- pagamentos: Journal des cobrancas (append-only)

Les noms de tables et de colonnes suivent le schema existant
de la base (portugais), partage avec le front.
"""
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, Numeric, String

from src.infrastructure.persistence.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserProfileModel(Base):
    """
    Table user_profiles - Etat d'assinatura de l'utilisateur.

    Colonnes:
        user_id: ID du fournisseur d'identite (cle primaire)
        assinatura_id: ID de la cobranca AbacatePay
        data_assinatura: Date de creation de l'assinatura
        proximo_pagamento: Date du prochain paiement
        assinatura_ativa: False tant que le paiement n'est pas confirme
        updated_at: Derniere modification
    """
    __tablename__ = "user_profiles"

    user_id = Column(String(64), primary_key=True)
    assinatura_id = Column(String(100), nullable=True, index=True)
    data_assinatura = Column(DateTime(timezone=True), nullable=True)
    proximo_pagamento = Column(DateTime(timezone=True), nullable=True)
    assinatura_ativa = Column(Boolean, default=False, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


class PaymentModel(Base):
    """
    Table pagamentos - Une ligne par cobranca creee.

    Colonnes:
        id: Identifiant auto-incremente
        user_id: ID de l'utilisateur
        assinatura_id: ID de la cobranca (meme valeur que user_profiles)
        efi_charge_id: Reference externe de la cobranca
        valor: Montant en reais
        metodo_pagamento: "pix"
        status: "pending" a la creation
        created_at: Date de creation
    """
    __tablename__ = "pagamentos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    assinatura_id = Column(String(100), nullable=False, index=True)
    efi_charge_id = Column(String(100), nullable=True)
    valor = Column(Numeric(10, 2), nullable=False)
    metodo_pagamento = Column(String(20), nullable=False, default="pix")
    status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index('idx_pagamentos_user_status', 'user_id', 'status'),
    )
