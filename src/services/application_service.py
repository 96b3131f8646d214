"""
Service de gestion des demandes d'inscription.

L'ApplicationService orchestre l'enregistrement des demandes et leur
expiration, en s'appuyant uniquement sur des ports :
- IApplicationRepository pour le stockage des demandes
- ICustomerRepository pour l'enregistrement des clients
- IUserNotificationClient pour prevenir les demandeurs
- IClock pour l'instant courant

Le service ne conserve aucun etat propre : toute la collection vit
dans le repository.
"""

from datetime import datetime
from typing import Optional

from loguru import logger

from src.core.entities.application import Application, ExpiryPolicy
from src.core.exceptions import NotificationError
from src.core.ports.applications import IApplicationRepository, ICustomerRepository
from src.core.ports.clock import IClock
from src.core.ports.notifications import IUserNotificationClient
from src.utils.dates import utc_now

# Delai d'expiration par defaut (en mois calendaires)
DEFAULT_EXPIRY_MONTHS = 1

EXPIRED_MESSAGE = "Your application {id} has expired"


def expired_message(application: Application) -> str:
    """Message envoye au demandeur quand sa demande expire."""
    return EXPIRED_MESSAGE.format(id=application.id)


class ApplicationService:
    """
    Service d'inscription et d'expiration des demandes.

    Example:
        service = ApplicationService(
            application_repo=repo,
            notification_client=client,
            customer_repo=customers,
        )

        service.register_initial_application(Application.create("Ada"))
        expired = service.expire_applications()
    """

    def __init__(
        self,
        application_repo: IApplicationRepository,
        notification_client: IUserNotificationClient,
        customer_repo: ICustomerRepository,
        clock: Optional[IClock] = None,
        expiry_months: int = DEFAULT_EXPIRY_MONTHS,
        expiry_policy: ExpiryPolicy = ExpiryPolicy.PER_APPLICATION,
    ) -> None:
        """
        Initialise le service avec ses collaborateurs.

        Args:
            application_repo: Repository des demandes
            notification_client: Client d'envoi des notifications
            customer_repo: Repository des clients
            clock: Horloge (defaut: heure systeme UTC)
            expiry_months: Age minimum, en mois, d'une demande expiree
            expiry_policy: Regle d'expiration par demande ou par demandeur
        """
        self._application_repo = application_repo
        self._notification_client = notification_client
        self._customer_repo = customer_repo
        self._clock = clock
        self._expiry_months = expiry_months
        self._expiry_policy = expiry_policy

    def register_initial_application(self, application: Application) -> Application:
        """
        Enregistre une demande et inscrit le demandeur comme client.

        Pas d'idempotence : enregistrer deux fois la meme demande
        la duplique dans le repository.
        """
        saved = self._application_repo.save(application)
        self._customer_repo.register_customer(application.name)
        logger.info(
            "Demande enregistree",
            application_id=application.id,
            name=application.name,
        )
        return saved

    def applications_for_name(self, name: str) -> list[Application]:
        """Historique complet des demandes du demandeur, expirees comprises."""
        return self._application_repo.find_by_name(name)

    def open_applications_for(self, name: str) -> list[Application]:
        """Demandes du demandeur qui n'ont pas encore expire."""
        return self._application_repo.find_open_by_name(name)

    def expire_applications(self) -> list[Application]:
        """
        Balaye les demandes ouvertes et fait expirer les plus anciennes.

        Chaque demande ouverte est evaluee une seule fois. Une demande
        expiree sort de l'ensemble ouvert puis le demandeur est notifie.
        Un echec de notification est journalise et n'interrompt pas
        le balayage. Un echec du repository remonte a l'appelant sans
        annuler les expirations deja faites.

        Returns:
            Les demandes expirees, dans l'ordre du balayage
        """
        now = self._clock.now() if self._clock else utc_now()
        open_applications = self._application_repo.find_open()
        to_expire = self._select_expired(open_applications, now)

        expired = []
        for application in to_expire:
            # Doublon deja expire plus haut dans le balayage
            if not self._application_repo.mark_expired(application, now):
                continue
            expired.append(application)
            logger.info(
                "Demande expiree",
                application_id=application.id,
                name=application.name,
            )
            self._notify_expired(application)

        logger.debug(
            "Balayage termine: {} demande(s) expiree(s) sur {}",
            len(expired),
            len(open_applications),
            policy=self._expiry_policy.value,
        )
        return expired

    def _select_expired(
        self, applications: list[Application], now: datetime
    ) -> list[Application]:
        """Selectionne les demandes a expirer selon la regle configuree."""
        overdue = [
            app for app in applications
            if app.age_reaches(self._expiry_months, now)
        ]
        if self._expiry_policy is ExpiryPolicy.PER_APPLICATION:
            return overdue

        # Par demandeur : tout ou rien
        overdue_names = {app.name for app in overdue}
        return [app for app in applications if app.name in overdue_names]

    def _notify_expired(self, application: Application) -> None:
        try:
            self._notification_client.notify_user(
                application.name, expired_message(application)
            )
        except NotificationError as e:
            logger.warning(
                "Notification d'expiration non envoyee: {}",
                e,
                application_id=application.id,
            )


def create_application_service(
    application_repo: IApplicationRepository,
    notification_client: IUserNotificationClient,
    customer_repo: ICustomerRepository,
    clock: Optional[IClock] = None,
    expiry_months: int = DEFAULT_EXPIRY_MONTHS,
    expiry_policy: ExpiryPolicy = ExpiryPolicy.PER_APPLICATION,
) -> ApplicationService:
    """
    Assemble un ApplicationService a partir de ses collaborateurs.

    Point d'assemblage unique : la production passe les adaptateurs
    SQLModel, les tests passent les fakes en memoire.
    """
    return ApplicationService(
        application_repo=application_repo,
        notification_client=notification_client,
        customer_repo=customer_repo,
        clock=clock,
        expiry_months=expiry_months,
        expiry_policy=expiry_policy,
    )
