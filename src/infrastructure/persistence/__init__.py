"""
Module de persistance SQLite pour AppReg.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports de stockage

Usage:
    from src.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    session = next(get_session())
"""

from src.infrastructure.persistence.database import (
    get_engine,
    get_session,
    init_db,
)
from src.infrastructure.persistence.models import ApplicationModel, CustomerModel

__all__ = [
    "get_engine",
    "get_session",
    "init_db",
    "ApplicationModel",
    "CustomerModel",
]
