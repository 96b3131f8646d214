"""
Modeles SQLModel pour la base de donnees AppReg.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- applications: Demandes d'inscription (expired_at non nul = expiree)
- customers: Clients connus

Les dates sont des datetime aware en UTC, stockees dans des colonnes
DateTime(timezone=True).
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ApplicationModel(SQLModel, table=True):
    """
    Modele representant une demande d'inscription.

    application_id n'est pas unique : enregistrer deux fois la meme
    demande produit deux lignes. L'ordre d'insertion est celui de id.
    """

    __tablename__ = "applications"

    id: int | None = Field(default=None, primary_key=True)
    application_id: str = Field(index=True)
    name: str = Field(index=True)
    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    expired_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True, index=True),
    )


class CustomerModel(SQLModel, table=True):
    """Modele representant un client connu."""

    __tablename__ = "customers"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)
    registered_at: datetime | None = Field(
        default_factory=_utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=True),
    )
