"""
Fixtures pytest partagees pour les tests AppReg.

Ce module contient les fixtures communes utilisees dans les tests:
- Fakes en memoire des ports (repositories, notifications, horloge)
- ApplicationService assemble avec les fakes
- Settings de test avec chemins temporaires
"""

from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from src.config import Settings
from src.services.application_service import (
    ApplicationService,
    create_application_service,
)
from tests.fakes import (
    FakeApplicationRepository,
    FakeClock,
    FakeCustomerRepository,
    FakeUserNotificationClient,
)


@pytest.fixture
def application_repo() -> FakeApplicationRepository:
    """Repository de demandes en memoire."""
    return FakeApplicationRepository()


@pytest.fixture
def customer_repo() -> FakeCustomerRepository:
    """Repository de clients en memoire."""
    return FakeCustomerRepository()


@pytest.fixture
def notification_client() -> FakeUserNotificationClient:
    """Client de notification qui capture les messages."""
    return FakeUserNotificationClient()


@pytest.fixture
def clock() -> FakeClock:
    """Horloge figee au 15 janvier 2024 midi UTC."""
    return FakeClock()


@pytest.fixture
def application_service(
    application_repo, notification_client, customer_repo, clock
) -> ApplicationService:
    """ApplicationService assemble avec les fakes (regle par demande, 1 mois)."""
    return create_application_service(
        application_repo=application_repo,
        notification_client=notification_client,
        customer_repo=customer_repo,
        clock=clock,
    )


@pytest.fixture
def db_session():
    """Session SQLModel sur une base SQLite en memoire."""
    # Import des modeles pour enregistrer leurs metadonnees
    from src.infrastructure.persistence import models  # noqa: F401

    engine = create_engine("sqlite:///:memory:")
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la base et les logs.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        expiry_months=1,
        log_file=tmp_path / "test.log",
    )
