"""
Base declarative SQLAlchemy commune a tous les modeles.
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()
