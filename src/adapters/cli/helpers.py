"""
Utilitaires partages pour les commandes CLI d'AppReg.

Ce module fournit :
- console : instance Rich Console partagee
- applications_table : rendu Rich d'une liste de demandes
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from src.core.entities.application import Application

console = Console()


def applications_table(
    applications: Iterable[Application],
    title: str,
    open_ids: Optional[set[str]] = None,
) -> Table:
    """
    Construit un tableau Rich des demandes.

    Args:
        applications: Demandes a afficher
        title: Titre du tableau
        open_ids: Ids des demandes ouvertes; si fourni, ajoute une colonne Statut
    """
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Demandeur")
    table.add_column("Creee le", style="green")
    if open_ids is not None:
        table.add_column("Statut")

    for app in applications:
        row = [app.id, app.name, app.created_at.strftime("%Y-%m-%d %H:%M")]
        if open_ids is not None:
            row.append("[green]ouverte[/green]" if app.id in open_ids else "[red]expiree[/red]")
        table.add_row(*row)
    return table
