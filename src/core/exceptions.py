"""
Exceptions du domaine AppReg.

Toutes les erreurs levees par le domaine et ses adaptateurs heritent
de AppRegError pour permettre une capture unique en bordure (CLI).
"""


class AppRegError(Exception):
    """Erreur de base de l'application."""


class InvalidApplicationError(AppRegError, ValueError):
    """Demande d'inscription invalide (nom vide, etc.)."""


class RepositoryError(AppRegError):
    """
    Echec d'acces au stockage.

    Levee par les repositories concrets quand la base est indisponible
    ou qu'une ecriture echoue. Propagee telle quelle a l'appelant du service.
    """


class NotificationError(AppRegError):
    """
    Echec d'envoi d'une notification.

    Attributes:
        recipient: Nom du destinataire de la notification
    """

    def __init__(self, recipient: str, reason: str = "") -> None:
        """
        Initialise l'erreur avec le destinataire concerne.

        Args:
            recipient: Nom du destinataire
            reason: Description optionnelle de la cause
        """
        self.recipient = recipient
        message = f"Notification impossible pour {recipient}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
