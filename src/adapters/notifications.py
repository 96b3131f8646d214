"""
Adaptateur de notification par journalisation.

Implementation de production de IUserNotificationClient : aucun transport
reel (e-mail, SMS) n'est branche, chaque notification est ecrite au niveau
NOTIFY, que configure_logging redirige vers le journal des notifications.
"""

from loguru import logger

from src.core.exceptions import NotificationError
from src.core.ports.notifications import IUserNotificationClient
from src.logging_config import NOTIFICATION_LEVEL, register_notification_level


class LoggingNotificationClient(IUserNotificationClient):
    """
    Client de notification qui ecrit les messages dans les logs.

    Fire-and-forget : pas d'accuse de reception ni de relecture.
    """

    def __init__(self) -> None:
        register_notification_level()

    def notify_user(self, name: str, message: str) -> None:
        """
        Journalise le message destine a `name`.

        Raises:
            NotificationError: Si le destinataire est vide
        """
        if not name:
            raise NotificationError(name, "destinataire vide")
        logger.log(NOTIFICATION_LEVEL, "{}", message, recipient=name)
