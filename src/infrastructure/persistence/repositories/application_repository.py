"""
Implementation SQLModel du repository des demandes d'inscription.

Implemente l'interface IApplicationRepository pour la persistance
des demandes dans la base de donnees SQLite via SQLModel.
"""

from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.application import Application
from src.core.exceptions import RepositoryError
from src.core.ports.applications import IApplicationRepository
from src.infrastructure.persistence.models import ApplicationModel


def _as_utc(moment: datetime) -> datetime:
    """Ramene une date en UTC aware. SQLite relit les dates sans fuseau."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class SQLModelApplicationRepository(IApplicationRepository):
    """
    Repository SQLModel pour les demandes d'inscription.

    Une demande expiree garde sa ligne avec expired_at renseigne :
    elle reste visible dans l'historique (find_by_name) mais sort
    des requetes sur les demandes ouvertes.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: ApplicationModel) -> Application:
        """Convertit un modele DB en entite domaine."""
        return Application(
            id=model.application_id,
            name=model.name,
            created_at=_as_utc(model.created_at),
        )

    def _to_model(self, entity: Application) -> ApplicationModel:
        """Convertit une entite domaine en modele DB."""
        return ApplicationModel(
            application_id=entity.id,
            name=entity.name,
            created_at=_as_utc(entity.created_at),
        )

    def _fetch(self, statement) -> list[Application]:
        try:
            models = self._session.exec(statement.order_by(ApplicationModel.id)).all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Lecture des demandes impossible: {e}") from e
        return [self._to_entity(model) for model in models]

    def save(self, application: Application) -> Application:
        """Insere une nouvelle ligne pour la demande."""
        try:
            self._session.add(self._to_model(application))
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise RepositoryError(
                f"Enregistrement de la demande {application.id} impossible: {e}"
            ) from e
        return application

    def find_by_name(self, name: str) -> list[Application]:
        return self._fetch(
            select(ApplicationModel).where(ApplicationModel.name == name)
        )

    def find_open(self) -> list[Application]:
        return self._fetch(
            select(ApplicationModel).where(ApplicationModel.expired_at.is_(None))
        )

    def find_open_by_name(self, name: str) -> list[Application]:
        return self._fetch(
            select(ApplicationModel).where(
                ApplicationModel.name == name,
                ApplicationModel.expired_at.is_(None),
            )
        )

    def mark_expired(self, application: Application, expired_at: datetime) -> bool:
        """Renseigne expired_at sur toutes les lignes ouvertes de la demande."""
        statement = select(ApplicationModel).where(
            ApplicationModel.application_id == application.id,
            ApplicationModel.expired_at.is_(None),
        )
        try:
            models = self._session.exec(statement).all()
            if not models:
                return False
            for model in models:
                model.expired_at = _as_utc(expired_at)
                self._session.add(model)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise RepositoryError(
                f"Expiration de la demande {application.id} impossible: {e}"
            ) from e
        return True

