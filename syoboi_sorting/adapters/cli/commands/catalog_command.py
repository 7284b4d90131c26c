"""
Commande CLI catalog : affiche le catalogue Syoboi Calendar.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from syoboi_sorting.adapters.cli.helpers import console, suppress_loguru, with_container
from syoboi_sorting.core.entities import CatalogEntry
from syoboi_sorting.core.errors import CatalogError


def catalog(
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Filtre sur le titre (insensible a la casse)"),
    ] = None,
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", min=0, help="Nombre maximum de lignes (0 = tout)"),
    ] = 50,
) -> None:
    """Affiche les programmes du catalogue distant."""
    asyncio.run(_catalog_async(search, limit))


@with_container()
async def _catalog_async(container, search: Optional[str], limit: int) -> None:
    """Implementation async de la commande catalog."""
    client = container.catalog_client()
    try:
        entries = await client.fetch_titles()
    except CatalogError as e:
        console.print(f"[red]Erreur: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        await client.close()

    entries = filter_entries(entries, search)
    shown = entries if limit == 0 else entries[:limit]

    table = Table(title="Catalogue Syoboi Calendar")
    table.add_column("TID", justify="right", style="cyan")
    table.add_column("Titre")
    table.add_column("Repertoire", style="dim")
    for entry in shown:
        table.add_row(entry.tid, escape(entry.title), escape(entry.directory_name))

    with suppress_loguru():
        console.print(table)
        if len(entries) > len(shown):
            console.print(
                f"[dim]({len(entries) - len(shown)} programmes non affiches, utilisez --limit 0)[/dim]"
            )
        console.print(f"\n[bold]Total: {len(entries)} programme(s)[/bold]")


def _tid_sort_key(entry: CatalogEntry) -> tuple:
    """Tri numerique des TID, les TID non numeriques en dernier."""
    if entry.tid.isdecimal():
        return (0, int(entry.tid), entry.title)
    return (1, entry.tid, entry.title)


def filter_entries(entries: list[CatalogEntry], search: Optional[str]) -> list[CatalogEntry]:
    """Filtre par titre puis trie par TID."""
    if search:
        needle = search.casefold()
        entries = [e for e in entries if needle in e.title.casefold()]
    return sorted(entries, key=_tid_sort_key)
