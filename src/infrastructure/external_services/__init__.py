"""
External Services - Adapters vers les API tierces.

Adapters disponibles:
---------------------
- AbacatePayClient: Creation de cobrancas (PIX, mensuel)
"""

from src.infrastructure.external_services.abacatepay_client import AbacatePayClient

__all__ = ["AbacatePayClient"]
