"""
Presentation layer - Page d'assinatura Streamlit.

Pages:
------
- subscription_page: Offre mensuelle PRAXIS et bouton "Assinar agora"
"""
