"""
Service d'orchestration du tri complet.

Enchaine les etapes du pipeline, sequentiellement :
- Recuperation du catalogue (un appel API)
- Tri du repertoire racine

Le chargement de config.json est fait par l'appelant (CLI) avant execute().
Les erreurs de recuperation du catalogue sont fatales : rien n'est trie.
"""

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from syoboi_sorting.config import Config
from syoboi_sorting.core.entities import CatalogEntry
from syoboi_sorting.core.errors import CatalogError
from syoboi_sorting.core.ports.api_clients import ICatalogClient
from syoboi_sorting.services.sorter import SorterService, SortReport


@dataclass
class WorkflowResult:
    """Resultat final du tri."""

    success: bool
    entries: list[CatalogEntry] = field(default_factory=list)
    report: Optional[SortReport] = None
    errors: list[str] = field(default_factory=list)


class SortingWorkflow:
    """
    Orchestration catalogue -> tri.

    Utilisation typique:
        workflow = SortingWorkflow(client, sorter)
        result = await workflow.execute(load_config())
    """

    def __init__(self, catalog_client: ICatalogClient, sorter: SorterService) -> None:
        self._client = catalog_client
        self._sorter = sorter

    async def execute(self, config: Config, dry_run: bool = False) -> WorkflowResult:
        """
        Execute le pipeline complet.

        Args:
            config: Configuration chargee depuis config.json
            dry_run: Annonce les deplacements sans modifier les fichiers

        Returns:
            WorkflowResult ; success=False si le catalogue n'a pas pu etre recupere.
        """
        try:
            entries = await self._client.fetch_titles()
        except CatalogError as e:
            logger.error(f"Recuperation du catalogue impossible: {e}")
            return WorkflowResult(success=False, errors=[str(e)])
        finally:
            await self._client.close()

        report = self._sorter.sort(config.root_dir, entries, dry_run=dry_run)
        return WorkflowResult(success=True, entries=entries, report=report)
