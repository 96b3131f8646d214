"""
Interfaces ports pour le stockage des demandes et des clients.

Interfaces abstraites (ports) définissant les contrats de persistance.
Les implémentations (adaptateurs) fournissent le stockage concret
(SQLite via SQLModel en production, en mémoire pour les tests).
"""

from abc import ABC, abstractmethod
from datetime import datetime

from src.core.entities.application import Application, Customer


class IApplicationRepository(ABC):
    """
    Interface de stockage des demandes d'inscription.

    Le repository possède la collection : une demande expirée reste
    stockée (historique) mais sort de l'ensemble des demandes ouvertes.
    """

    @abstractmethod
    def save(self, application: Application) -> Application:
        """Sauvegarde une demande (insertion ou mise à jour par id)."""
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> list[Application]:
        """Toutes les demandes du demandeur, ouvertes ou non, dans l'ordre d'insertion."""
        ...

    @abstractmethod
    def find_open(self) -> list[Application]:
        """Toutes les demandes non expirées, dans l'ordre d'insertion."""
        ...

    @abstractmethod
    def find_open_by_name(self, name: str) -> list[Application]:
        """Les demandes non expirées du demandeur."""
        ...

    @abstractmethod
    def mark_expired(self, application: Application, expired_at: datetime) -> bool:
        """
        Retire une demande de l'ensemble des demandes ouvertes.

        expired_at est l'instant du balayage, lu sur l'horloge du service.
        Retourne False si la demande est inconnue ou déjà expirée.
        """
        ...


class ICustomerRepository(ABC):
    """Interface d'enregistrement des clients connus."""

    @abstractmethod
    def register_customer(self, name: str) -> Customer:
        """Enregistre le demandeur comme client. Idempotent."""
        ...

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Vérifie si le nom correspond à un client connu."""
        ...
