"""
Infrastructure Layer - Adapters pour les services externes.

Cette couche contient les implementations concretes des ports definis
dans le domaine. Elle gere les interactions avec:
- Base de donnees PostgreSQL (user_profiles, pagamentos)
- API AbacatePay (creation de cobranca)
- Logging structure (structlog)
"""
