"""
Interface port pour l'envoi de notifications aux demandeurs.

Le contrat est en écriture seule : aucune relecture des messages envoyés
n'est possible en production (e-mail, SMS...). Seul le fake de test
conserve les messages pour vérification.
"""

from abc import ABC, abstractmethod


class IUserNotificationClient(ABC):
    """Envoi d'un message à un destinataire nommé."""

    @abstractmethod
    def notify_user(self, name: str, message: str) -> None:
        """
        Envoie un message au destinataire.

        Args :
            name : Nom du destinataire
            message : Texte du message

        Lève :
            NotificationError : Si l'adaptateur ne peut pas envoyer le message
        """
        ...
