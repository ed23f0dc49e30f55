"""
API REST - FastAPI.

Handler de creation de cobranca appele par la page d'assinatura.
Utilise JWT pour l'authentification.

Routers disponibles:
--------------------
- billing: Cobranca AbacatePay, statut d'assinatura

Usage:
------
    uvicorn src.presentation.api.main:app --reload
"""

from src.presentation.api.main import create_app

__all__ = ["create_app"]
