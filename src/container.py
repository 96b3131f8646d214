"""
Container d'injection de dependances via dependency-injector.

Assemble le graphe de production : repositories SQLModel, client de
notification par logs et horloge systeme. Le service lui-meme est construit
par create_application_service, le meme point d'assemblage que les tests
utilisent avec les fakes.
"""

from dependency_injector import containers, providers

from .adapters.clock import SystemClock
from .adapters.notifications import LoggingNotificationClient
from .config import Settings
from .infrastructure.persistence.database import init_db, get_session
from .infrastructure.persistence.repositories import (
    SQLModelApplicationRepository,
    SQLModelCustomerRepository,
)
from .services.application_service import create_application_service


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        service = container.application_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance avec session fraiche
    application_repository = providers.Factory(
        SQLModelApplicationRepository,
        session=session,
    )
    customer_repository = providers.Factory(
        SQLModelCustomerRepository,
        session=session,
    )

    # Clients (stateless - Singletons)
    notification_client = providers.Singleton(LoggingNotificationClient)
    clock = providers.Singleton(SystemClock)

    # Service d'inscription - Factory car depend de repositories (sessions fraiches)
    application_service = providers.Factory(
        create_application_service,
        application_repo=application_repository,
        notification_client=notification_client,
        customer_repo=customer_repository,
        clock=clock,
        expiry_months=config.provided.expiry_months,
        expiry_policy=config.provided.expiry_policy,
    )
