"""
Use Cases de l'application.

Les Use Cases orchestrent les entites du domaine et les services
externes pour realiser les fonctionnalites de l'application.

Chaque Use Case:
    - A une seule responsabilite
    - Utilise les ports (interfaces) pour les dependances
    - Ne connait pas les details d'implementation
"""

from src.application.use_cases.billing import CreateBillingUseCase

__all__ = [
    "CreateBillingUseCase",
]
