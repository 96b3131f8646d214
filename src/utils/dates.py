"""
Arithmetique de dates en mois calendaires.

Le delai d'expiration est exprime en mois : un decalage de N mois conserve
le jour du mois quand il existe et le ramene au dernier jour sinon
(31 janvier + 1 mois = 28 ou 29 fevrier).
"""

import calendar
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Retourne l'instant courant en UTC (datetime aware)."""
    return datetime.now(timezone.utc)


def add_months(moment: datetime, months: int) -> datetime:
    """
    Decale une date d'un nombre de mois calendaires.

    Args:
        moment: Date de depart (naive ou aware, le fuseau est conserve)
        months: Nombre de mois a ajouter (negatif pour reculer)

    Returns:
        La date decalee, avec le jour borne au dernier jour du mois cible
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)
