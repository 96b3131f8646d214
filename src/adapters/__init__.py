"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Contenu :
- cli/ : Interface ligne de commande (Typer)
- notifications.py : Notifications écrites dans les logs
- clock.py : Horloge système

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
Cela permet de changer les implémentations sans affecter la logique métier.
"""

from src.adapters.clock import SystemClock
from src.adapters.notifications import LoggingNotificationClient

__all__ = [
    "LoggingNotificationClient",
    "SystemClock",
]
