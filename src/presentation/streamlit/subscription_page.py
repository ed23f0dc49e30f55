"""
Page d'assinatura PRAXIS (Streamlit).

Affiche l'offre mensuelle et le bouton "Assinar agora". Un clic cree
la cobranca via l'API puis redirige le navigateur vers la page de
paiement PIX.

Session:
--------
Le fournisseur d'identite depose la session dans
st.session_state["auth_session"]:
    {"id": "...", "email": "...", "access_token": "...",
     "user_metadata": {"full_name": "...", "cpf": "..."}}

Usage:
------
    streamlit run src/presentation/streamlit/subscription_page.py
"""

import sys
from html import escape
from pathlib import Path

# Ajouter la racine du projet au path pour les imports
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Charger les variables d'environnement depuis .env
from dotenv import load_dotenv
load_dotenv(PROJECT_ROOT / ".env")

import streamlit as st

from src.domain.entities.user import User
from src.domain.value_objects import Money
from src.presentation.streamlit.config import get_checkout_settings
from src.presentation.view_models.subscription_view_model import (
    PLAN_AMOUNT,
    BillingApiClient,
    SubscriptionOutcome,
    SubscriptionViewModel,
)


SESSION_KEY = "auth_session"
VIEW_MODEL_KEY = "subscription_view_model"

PLAN_FEATURES = [
    "Acesso completo à plataforma PRAXIS",
    "Pagamento mensal via PIX",
    "Cancele quando quiser",
]


def get_session_user() -> User | None:
    """Retourne l'utilisateur de la session, None si deconnecte."""
    session = st.session_state.get(SESSION_KEY)
    if not session or not session.get("id"):
        return None
    return User.from_session(session)


def get_view_model() -> SubscriptionViewModel:
    """View model unique par session (garde anti double clic)."""
    if VIEW_MODEL_KEY not in st.session_state:
        settings = get_checkout_settings()
        st.session_state[VIEW_MODEL_KEY] = SubscriptionViewModel(
            BillingApiClient(
                settings.billing_endpoint_url,
                timeout=settings.billing_request_timeout_seconds,
            ),
            login_url=settings.login_url,
        )
    return st.session_state[VIEW_MODEL_KEY]


def redirect_to(url: str) -> None:
    """Navigation pleine page vers une URL externe."""
    safe_url = escape(url, quote=True)
    st.markdown(
        f'<meta http-equiv="refresh" content="0; url={safe_url}">',
        unsafe_allow_html=True,
    )
    st.link_button("Ir para o pagamento", url, type="primary")


def handle_outcome(outcome: SubscriptionOutcome) -> None:
    """Affiche le resultat ou redirige."""
    if outcome.busy:
        st.info(outcome.message)
        return

    if outcome.success:
        st.toast(outcome.message or "Redirecionando para o pagamento...")
        redirect_to(outcome.redirect_url)
        return

    st.toast(outcome.message)
    st.error(outcome.message)
    if outcome.requires_login:
        redirect_to(outcome.redirect_url)


def render_subscription_page() -> None:
    """Affiche la page d'assinatura."""
    st.title("PRAXIS")
    st.subheader("Assinatura Mensal")

    price = Money.from_any(PLAN_AMOUNT)
    st.markdown(f"## {price.format()} /mês")
    for feature in PLAN_FEATURES:
        st.markdown(f"- {feature}")

    view_model = get_view_model()
    clicked = st.button(
        "Processando..." if view_model.is_busy else "Assinar agora",
        type="primary",
        disabled=view_model.is_busy,
        use_container_width=True,
    )

    if clicked:
        with st.spinner("Processando..."):
            outcome = view_model.subscribe(get_session_user())
        handle_outcome(outcome)


if __name__ == "__main__":
    st.set_page_config(page_title="PRAXIS - Assinatura", page_icon="💳")
    render_subscription_page()
