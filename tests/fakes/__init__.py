"""
Fakes en memoire des ports d'AppReg.

Chaque fake implemente le contrat ABC du port correspondant et ajoute des
methodes d'inspection absentes du port (lecture des notifications envoyees,
liste des clients...). Contrairement a un mock, un fake a un vrai
comportement et permet de verifier le resultat plutot que les appels.

- FakeApplicationRepository : stockage des demandes
- FakeCustomerRepository : clients connus
- FakeUserNotificationClient : notifications capturees par destinataire
- FakeClock : horloge figee et deplacable
"""

from tests.fakes.clock import FakeClock
from tests.fakes.notifications import FakeUserNotificationClient
from tests.fakes.repositories import FakeApplicationRepository, FakeCustomerRepository

__all__ = [
    "FakeApplicationRepository",
    "FakeClock",
    "FakeCustomerRepository",
    "FakeUserNotificationClient",
]
