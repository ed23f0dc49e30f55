"""
Application Layer - Orchestration des Use Cases.

Cette couche contient:
    - use_cases/: Cas d'utilisation de l'application

Principes:
    - Depend des ports definis par le domaine
    - Orchestre les entites du domaine via les use cases
"""

__all__ = []
