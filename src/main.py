"""
Point d'entrée CLI d'AppReg.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import expire, list_applications, register
from .config import Settings
from .container import Container
from .logging_config import configure_logging_from_settings

app = typer.Typer(
    name="appreg",
    help="Gestion des demandes d'inscription",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """AppReg - Inscription et expiration des demandes."""
    if quiet or verbose:
        configure_logging_from_settings(
            get_config(), log_level="ERROR" if quiet else "DEBUG"
        )


app.command()(register)
# Note: "list" masquerait le builtin, donc on utilise name= explicitement
app.command(name="list")(list_applications)
app.command()(expire)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration AppReg")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Délai d'expiration : {config.expiry_months} mois")
    typer.echo(f"Règle d'expiration : {config.expiry_policy.value}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Journal des notifications : {config.notification_log_file}")


def main() -> None:
    """Point d'entrée de l'application."""
    configure_logging_from_settings(container.config())

    logger.info("Démarrage d'AppReg", version="0.1.0")

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
