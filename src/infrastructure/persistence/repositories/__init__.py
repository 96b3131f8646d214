"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/applications.py, utilisant SQLModel pour
la persistance SQLite.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
- Traduit les erreurs SQLAlchemy en RepositoryError
"""

from src.infrastructure.persistence.repositories.application_repository import (
    SQLModelApplicationRepository,
)
from src.infrastructure.persistence.repositories.customer_repository import (
    SQLModelCustomerRepository,
)

__all__ = [
    "SQLModelApplicationRepository",
    "SQLModelCustomerRepository",
]
