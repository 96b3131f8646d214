"""
Entités de demande d'inscription.

Une Application représente une tentative d'inscription d'un demandeur.
Elle est immuable : l'expiration n'est pas un champ de l'entité mais
l'absence de la demande dans l'ensemble des demandes ouvertes du repository.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from src.core.exceptions import InvalidApplicationError
from src.utils.dates import add_months, utc_now


def _new_id() -> str:
    return uuid.uuid4().hex


class ExpiryPolicy(str, Enum):
    """
    Règle d'expiration appliquée lors du balayage.

    PER_APPLICATION : chaque demande est jugée sur son propre âge.
    PER_APPLICANT : si une demande d'un demandeur atteint le délai, toutes
    ses demandes ouvertes expirent avec elle.
    """

    PER_APPLICATION = "per_application"
    PER_APPLICANT = "per_applicant"


@dataclass(frozen=True)
class Application:
    """
    Demande d'inscription soumise par un demandeur.

    Un même demandeur peut avoir plusieurs demandes : le nom n'est pas unique.

    Attributs :
        name : Nom du demandeur (non vide)
        created_at : Date de création de la demande (UTC)
        id : Identifiant opaque, attribué à la création et jamais modifié
    """

    name: str
    created_at: datetime
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidApplicationError("Le nom du demandeur est obligatoire")
        if self.created_at.tzinfo is None:
            raise InvalidApplicationError(
                "La date de création doit porter un fuseau horaire (UTC attendu)"
            )

    @classmethod
    def create(cls, name: str, created_at: Optional[datetime] = None) -> "Application":
        """
        Crée une nouvelle demande, datée de maintenant par défaut.

        Args :
            name : Nom du demandeur
            created_at : Date de création explicite (optionnelle)

        Retourne :
            La nouvelle Application avec un identifiant frais
        """
        return cls(name=name, created_at=created_at or utc_now())

    @classmethod
    def valid(
        cls,
        name: str = "Ada Lovelace",
        months_offset: int = 0,
        now: Optional[datetime] = None,
    ) -> "Application":
        """
        Construit une demande valide décalée de quelques mois.

        Utilisé par les tests et la démo CLI pour fabriquer des demandes
        anciennes (months_offset négatif) ou futures (positif).
        """
        reference = now or utc_now()
        return cls.create(name, created_at=add_months(reference, months_offset))

    def age_reaches(self, months: int, now: datetime) -> bool:
        """Vrai si la demande a au moins `months` mois à l'instant `now`."""
        return self.created_at <= add_months(now, -months)


@dataclass(frozen=True)
class Customer:
    """Client connu, créé comme effet de bord d'une inscription."""

    name: str


@dataclass(frozen=True)
class Notification:
    """Message envoyé à un destinataire, sans accusé de réception."""

    recipient: str
    message: str
