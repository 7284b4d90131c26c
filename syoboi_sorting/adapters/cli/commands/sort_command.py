"""
Commande CLI sort : catalogue -> rangement du repertoire racine.
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from syoboi_sorting.adapters.cli.helpers import console, print_move, with_container
from syoboi_sorting.config import load_config
from syoboi_sorting.core.errors import ConfigReadError
from syoboi_sorting.services.sorter import MoveStatus, SortReport


def sort(
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Fichier de configuration JSON (defaut: config.json)"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Affiche les deplacements sans modifier les fichiers"),
    ] = False,
) -> None:
    """Range les fichiers du repertoire racine par programme."""
    asyncio.run(_sort_async(config_file, dry_run))


@with_container()
async def _sort_async(container, config_file: Optional[Path], dry_run: bool) -> None:
    """Implementation async de la commande sort."""
    settings = container.config()

    try:
        config = load_config(config_file or settings.config_file)
    except ConfigReadError as e:
        console.print(f"[red]Erreur: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    sorter = container.sorter_service(on_move=print_move)
    workflow = container.sorting_workflow(sorter=sorter)
    result = await workflow.execute(config, dry_run=dry_run)

    if not result.success:
        console.print(f"[red]Erreur: {escape('; '.join(result.errors))}[/red]")
        raise typer.Exit(1)

    _print_summary(result.report, dry_run)


def _print_summary(report: SortReport, dry_run: bool) -> None:
    """Affiche le bilan du tri."""
    # Repertoire illisible : abandon silencieux, deja consigne dans les logs
    if report.aborted:
        return

    for outcome in report.outcomes:
        if outcome.status == MoveStatus.FAILED:
            console.print(
                f"[yellow]Non deplace: {escape(str(outcome.operation.source))}[/yellow]"
            )

    if dry_run:
        console.print(f"\n[bold]Simulation: {report.planned_count} fichier(s) a deplacer[/bold]")
    else:
        console.print(f"\n[bold]Total: {report.moved_count} fichier(s) deplace(s)[/bold]")
