"""Interface port pour la lecture de l'heure courante."""

from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """Source de l'instant courant, remplaçable par une horloge figée en test."""

    @abstractmethod
    def now(self) -> datetime:
        """Retourne l'instant courant (datetime aware en UTC)."""
        ...
