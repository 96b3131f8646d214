"""
Implementation SQLModel du repository des clients.

Implemente l'interface ICustomerRepository : une ligne par nom de client.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.application import Customer
from src.core.exceptions import RepositoryError
from src.core.ports.applications import ICustomerRepository
from src.infrastructure.persistence.models import CustomerModel


class SQLModelCustomerRepository(ICustomerRepository):
    """Repository SQLModel pour les clients connus."""

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _get_model(self, name: str) -> CustomerModel | None:
        statement = select(CustomerModel).where(CustomerModel.name == name)
        return self._session.exec(statement).first()

    def register_customer(self, name: str) -> Customer:
        """Cree le client s'il n'existe pas encore."""
        try:
            if self._get_model(name) is None:
                self._session.add(CustomerModel(name=name))
                self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise RepositoryError(f"Enregistrement du client {name} impossible: {e}") from e
        return Customer(name=name)

    def exists(self, name: str) -> bool:
        try:
            return self._get_model(name) is not None
        except SQLAlchemyError as e:
            raise RepositoryError(f"Lecture du client {name} impossible: {e}") from e
