"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository :
- IApplicationRepository : Stockage des demandes d'inscription
- ICustomerRepository : Enregistrement des clients

Ports client :
- IUserNotificationClient : Envoi de notifications aux demandeurs
- IClock : Lecture de l'heure courante
"""

from src.core.ports.applications import (
    IApplicationRepository,
    ICustomerRepository,
)
from src.core.ports.clock import IClock
from src.core.ports.notifications import IUserNotificationClient

__all__ = [
    # Repositories
    "IApplicationRepository",
    "ICustomerRepository",
    # Clients
    "IUserNotificationClient",
    "IClock",
]
