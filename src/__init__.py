"""
Praxis Billing - Architecture Hexagonale

Structure:
    - domain/: Coeur metier (entites, value objects, services)
    - application/: Use cases (creation de cobranca)
    - infrastructure/: Adapters (DB, API AbacatePay, logging)
    - presentation/: API REST (FastAPI) et page Streamlit
"""

__version__ = "1.0.0"
