"""
Point d'entrée CLI de syoboi-sorting.

Configure le logging et fournit les commandes CLI. Lancé sans sous-commande,
le programme exécute le tri (comportement historique : il suffit de l'appeler
dans un répertoire contenant config.json).
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import catalog, sort
from .config import Settings, load_config
from .core.errors import ConfigReadError
from .logging_config import configure_logging

app = typer.Typer(
    name="syoboi-sorting",
    help="Range les enregistrements TV par programme Syoboi Calendar",
)

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


def _console_log_level(settings: Settings) -> str:
    """Niveau de log console selon -v / -q."""
    if state["quiet"]:
        return "ERROR"
    if state["verbose"] > 0:
        return "DEBUG"
    return settings.log_level


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
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
    """syoboi-sorting - Rangement des enregistrements par programme."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose

    settings = Settings()
    configure_logging(
        log_level=_console_log_level(settings),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Demarrage de syoboi-sorting", version=__version__)

    if ctx.invoked_subcommand is None:
        ctx.invoke(sort)


app.command()(sort)
app.command()(catalog)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    settings = Settings()
    typer.echo(f"Fichier de configuration : {settings.config_file}")
    try:
        config = load_config(settings.config_file)
        typer.echo(f"Répertoire racine : {config.root_dir}")
    except ConfigReadError as e:
        typer.echo(f"Répertoire racine : indisponible ({e.reason})")
    typer.echo(f"API : {settings.api_url}")
    typer.echo(f"Timeout : {settings.request_timeout}s")
    typer.echo(f"Niveau de log : {settings.log_level}")
    typer.echo(f"Fichier de log : {settings.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"syoboi-sorting v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
