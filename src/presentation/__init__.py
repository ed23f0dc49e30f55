"""
Presentation Layer - Interface utilisateur.

Cette couche contient l'API de facturation (FastAPI) et la page
d'assinatura (Streamlit) qui l'appelle.
"""
