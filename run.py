#!/usr/bin/env python3
"""
Point d'entree principal pour lancer PRAXIS Billing.

Usage:
------
    python3 run.py api     # API de facturation (uvicorn, port 8000)
    python3 run.py page    # Page d'assinatura Streamlit

Options passees:
----------------
- api: --host 0.0.0.0 --port $PORT (defaut 8000)
- page: --browser.gatherUsageStats=false (desactive la telemetrie)

Erreurs courantes:
------------------
- "Streamlit non trouve" : pip install -e .
- "ABACATEPAY_API_TOKEN" vide : toute creation de cobranca echouera (401 provider)
"""
import os
import sys
import subprocess
from pathlib import Path


API_APP = "src.presentation.api.main:app"
PAGE_PATH = Path("src") / "presentation" / "streamlit" / "subscription_page.py"


def build_command(target: str, script_dir: Path) -> list:
    """Construit la commande de lancement pour la cible demandee."""
    if target == "api":
        return [
            sys.executable, "-m", "uvicorn", API_APP,
            "--host", "0.0.0.0",
            "--port", os.getenv("PORT", "8000"),
        ]
    if target == "page":
        return [
            sys.executable, "-m", "streamlit", "run",
            str(script_dir / PAGE_PATH),
            "--browser.gatherUsageStats=false",
        ]
    raise ValueError(f"Cible inconnue: {target} (attendu: api, page)")


def main():
    """Lance l'API ou la page d'assinatura."""
    script_dir = Path(__file__).parent
    target = sys.argv[1] if len(sys.argv) > 1 else "api"

    try:
        command = build_command(target, script_dir)
    except ValueError as e:
        print(f"Erreur: {e}")
        sys.exit(1)

    try:
        subprocess.run(command, check=True, cwd=script_dir)
    except KeyboardInterrupt:
        print("\nApplication arrêtée.")
    except subprocess.CalledProcessError as e:
        print(f"Erreur lors du lancement: {e}")
        print("\nInstallez les dépendances:")
        print("  pip3 install -e .")
        sys.exit(1)


if __name__ == "__main__":
    main()
