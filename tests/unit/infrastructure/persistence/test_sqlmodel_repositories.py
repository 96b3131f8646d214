"""
Tests pour les repositories SQLModel (SQLite en memoire).

Verifie que l'adaptateur de production respecte le meme contrat
que le fake : historique conserve, expiration par drapeau.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from src.core.entities.application import Application
from src.core.exceptions import RepositoryError
from src.infrastructure.persistence.models import ApplicationModel, CustomerModel
from src.infrastructure.persistence.repositories import (
    SQLModelApplicationRepository,
    SQLModelCustomerRepository,
)
from src.services.application_service import create_application_service
from tests.fakes import FakeUserNotificationClient

CREATED = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
EXPIRED = datetime(2024, 2, 20, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def repo(db_session) -> SQLModelApplicationRepository:
    return SQLModelApplicationRepository(db_session)


@pytest.fixture
def customers(db_session) -> SQLModelCustomerRepository:
    return SQLModelCustomerRepository(db_session)


class TestSQLModelApplicationRepository:
    """Tests pour SQLModelApplicationRepository."""

    def test_save_and_find_by_name(self, repo):
        """Une demande sauvegardee est relue a l'identique."""
        application = Application.create("Ada", created_at=CREATED)

        repo.save(application)

        assert repo.find_by_name("Ada") == [application]

    def test_created_at_is_utc_aware(self, repo):
        """La date relue est remise en UTC aware."""
        repo.save(Application.create("Ada", created_at=CREATED))

        [loaded] = repo.find_by_name("Ada")
        assert loaded.created_at.tzinfo == timezone.utc
        assert loaded.created_at == CREATED

    def test_offset_datetime_is_stored_as_utc(self, repo):
        """Une date avec un autre fuseau est relue convertie en UTC."""
        paris = timezone(timedelta(hours=2))
        repo.save(Application.create("Ada", created_at=datetime(2024, 6, 1, 14, 0, tzinfo=paris)))

        [loaded] = repo.find_by_name("Ada")
        assert loaded.created_at == datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
        assert loaded.created_at.tzinfo == timezone.utc

    def test_insertion_order(self, repo):
        """find_by_name respecte l'ordre d'insertion."""
        first = Application.create("Ada", created_at=CREATED)
        second = Application.create("Ada", created_at=datetime(2020, 1, 1, tzinfo=timezone.utc))
        repo.save(first)
        repo.save(second)

        assert repo.find_by_name("Ada") == [first, second]

    def test_duplicate_save_creates_two_rows(self, repo, db_session):
        """Sauvegarder deux fois la meme demande cree deux lignes."""
        application = Application.create("Ada", created_at=CREATED)
        repo.save(application)
        repo.save(application)

        rows = db_session.exec(select(ApplicationModel)).all()
        assert len(rows) == 2
        assert repo.find_by_name("Ada") == [application, application]

    def test_mark_expired_removes_from_open_set(self, repo):
        """mark_expired retire la demande des demandes ouvertes."""
        expired = Application.create("Ada", created_at=CREATED)
        kept = Application.create("Ada", created_at=CREATED)
        repo.save(expired)
        repo.save(kept)

        assert repo.mark_expired(expired, EXPIRED) is True

        assert repo.find_open() == [kept]
        assert repo.find_open_by_name("Ada") == [kept]
        assert repo.find_by_name("Ada") == [expired, kept]

    def test_mark_expired_twice(self, repo):
        """Une demande deja expiree n'est pas expiree une seconde fois."""
        application = Application.create("Ada", created_at=CREATED)
        repo.save(application)

        assert repo.mark_expired(application, EXPIRED) is True
        assert repo.mark_expired(application, EXPIRED) is False

    def test_mark_expired_unknown(self, repo):
        """Une demande inconnue retourne False."""
        assert repo.mark_expired(Application.create("Ada", created_at=CREATED), EXPIRED) is False

    def test_expired_at_is_recorded(self, repo, db_session):
        """La ligne expiree porte l'instant fourni par l'appelant."""
        application = Application.create("Ada", created_at=CREATED)
        repo.save(application)
        repo.mark_expired(application, EXPIRED)

        row = db_session.exec(select(ApplicationModel)).first()
        assert row.expired_at.replace(tzinfo=timezone.utc) == EXPIRED

    def test_database_error_becomes_repository_error(self):
        """Les erreurs SQLAlchemy sont traduites en RepositoryError."""
        session = MagicMock()
        session.exec.side_effect = OperationalError("SELECT", {}, Exception("locked"))
        repo = SQLModelApplicationRepository(session)

        with pytest.raises(RepositoryError):
            repo.find_open()

    def test_write_error_rolls_back_session(self):
        """Un echec d'ecriture annule la transaction puis leve RepositoryError."""
        session = MagicMock()
        session.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))
        repo = SQLModelApplicationRepository(session)

        with pytest.raises(RepositoryError):
            repo.save(Application.create("Ada", created_at=CREATED))
        session.rollback.assert_called_once()


class TestSQLModelCustomerRepository:
    """Tests pour SQLModelCustomerRepository."""

    def test_register_customer(self, customers):
        customer = customers.register_customer("Ada")

        assert customer.name == "Ada"
        assert customers.exists("Ada")
        assert not customers.exists("Alan")

    def test_register_customer_is_idempotent(self, customers, db_session):
        """Inscrire deux fois le meme client ne cree qu'une ligne."""
        customers.register_customer("Ada")
        customers.register_customer("Ada")

        rows = db_session.exec(select(CustomerModel)).all()
        assert len(rows) == 1

    def test_registered_at_is_stamped(self, customers, db_session):
        """La date d'inscription du client est renseignee a l'ecriture."""
        customers.register_customer("Ada")

        row = db_session.exec(select(CustomerModel)).one()
        assert row.registered_at is not None
        assert row.registered_at.replace(tzinfo=timezone.utc) <= datetime.now(timezone.utc)


class TestServiceWithSQLModel:
    """Le service fonctionne a l'identique sur l'adaptateur SQLModel."""

    def test_expire_with_sqlite(self, repo, customers):
        notifications = FakeUserNotificationClient()
        service = create_application_service(
            application_repo=repo,
            notification_client=notifications,
            customer_repo=customers,
        )
        old = Application.valid(name="Ada", months_offset=-6)
        fresh = Application.valid(name="Ada")
        service.register_initial_application(old)
        service.register_initial_application(fresh)

        assert service.expire_applications() == [old]
        assert service.expire_applications() == []
        assert service.open_applications_for("Ada") == [fresh]
        assert service.applications_for_name("Ada") == [old, fresh]
        assert notifications.get_notifications_for_user("Ada") == [
            f"Your application {old.id} has expired"
        ]
