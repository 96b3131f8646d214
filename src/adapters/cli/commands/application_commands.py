"""
Commandes CLI de gestion des demandes (register, list, expire).
"""

from typing import Annotated

import typer

from src.adapters.cli.helpers import applications_table, console
from src.container import Container
from src.core.entities.application import Application
from src.core.exceptions import AppRegError


def _service():
    container = Container()
    container.database.init()
    return container.application_service()


def register(
    name: Annotated[str, typer.Argument(help="Nom du demandeur")],
    months_ago: Annotated[
        int,
        typer.Option(
            "--months-ago",
            min=0,
            help="Antidate la demande de N mois (demonstration de l'expiration)",
        ),
    ] = 0,
) -> None:
    """
    Enregistre une nouvelle demande d'inscription.

    Exemples:
      appreg register "Ada Lovelace"
      appreg register "Ada Lovelace" --months-ago 6
    """
    try:
        application = Application.valid(name=name, months_offset=-months_ago)
        _service().register_initial_application(application)
    except AppRegError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Demande enregistree:[/green] {application.id}")


def list_applications(
    name: Annotated[str, typer.Argument(help="Nom du demandeur")],
    open_only: Annotated[
        bool,
        typer.Option("--open", help="N'afficher que les demandes ouvertes"),
    ] = False,
) -> None:
    """Liste les demandes d'un demandeur."""
    try:
        service = _service()
        open_apps = service.open_applications_for(name)
        applications = open_apps if open_only else service.applications_for_name(name)
    except AppRegError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(1)

    if not applications:
        console.print(f"[yellow]Aucune demande pour {name}[/yellow]")
        return

    open_ids = None if open_only else {app.id for app in open_apps}
    console.print(applications_table(applications, f"Demandes de {name}", open_ids))


def expire() -> None:
    """Fait expirer les demandes trop anciennes et previent les demandeurs."""
    try:
        expired = _service().expire_applications()
    except AppRegError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(1)

    if not expired:
        console.print("Aucune demande a expirer.")
        return

    console.print(applications_table(expired, "Demandes expirees"))
    console.print(f"[bold]{len(expired)}[/bold] demande(s) expiree(s)")
