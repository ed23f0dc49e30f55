#!/usr/bin/env python3
"""
Script de creation des tables de facturation.
Cree user_profiles et pagamentos si elles n'existent pas.

Usage:
    python scripts/init_database.py [--check]

Options:
    --check   Verifie la connexion et les tables sans rien creer
"""

import sys
import argparse
from pathlib import Path

# Ajouter le dossier parent au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

from sqlalchemy import inspect

from src.infrastructure.logging import configure_logging
from src.infrastructure.persistence.database import (
    REQUIRED_TABLES,
    DatabaseManager,
    ensure_tables_exist,
)


def check_tables(db: DatabaseManager) -> list:
    """Retourne la liste des tables manquantes."""
    existing = set(inspect(db.engine).get_table_names())
    return [name for name in REQUIRED_TABLES if name not in existing]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialise les tables PRAXIS")
    parser.add_argument("--check", action="store_true", help="Verification seule")
    parser.add_argument("--database-url", default=None, help="URL (defaut: DATABASE_URL)")
    args = parser.parse_args(argv)

    configure_logging()
    db = DatabaseManager(args.database_url)

    if not db.health_check():
        print("❌ Base de données injoignable")
        return 1

    if args.check:
        missing = check_tables(db)
        if missing:
            print(f"⚠️ Tables manquantes: {', '.join(missing)}")
            return 1
        print("✅ Toutes les tables sont présentes")
        return 0

    if not ensure_tables_exist(db):
        return 1
    print(f"✅ Tables prêtes: {', '.join(REQUIRED_TABLES)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
