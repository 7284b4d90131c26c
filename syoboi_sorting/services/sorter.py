"""
Service de tri des enregistrements par programme.

Ce module fournit le rangement des fichiers du repertoire racine dans un
sous-repertoire par programme:
- Construction d'un motif de recherche depuis le titre du programme
- Listage unique du repertoire racine (instantane)
- Creation paresseuse du repertoire "<TID> <Titre>"
- Deplacement des fichiers correspondants, en conservant leur nom

Convention de nommage visee (fichiers partages):
    "<prefixe>-[字][再]Titre du programme #01 ..."
c'est-a-dire un tiret, des tags entre crochets optionnels, le titre exact,
puis le marqueur d'episode " #".
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from syoboi_sorting.core.entities import CatalogEntry
from syoboi_sorting.core.errors import (
    DirectoryCreateError,
    DirectoryReadError,
    FileMoveError,
    PatternCompileError,
)
from syoboi_sorting.core.ports.file_system import IFileSystem

DIRECTORY_MODE = 0o777

# Tiret puis tags entre crochets optionnels ("[字]", "[再]"...)
_TAGS_PREFIX = r"-(?:\[[^\]]+\])*"
_EPISODE_MARKER = " #"


def build_title_pattern(title: str) -> re.Pattern:
    """
    Construit le motif de recherche d'un programme.

    Le titre est echappe : il est compare litteralement, jamais interprete
    comme une expression reguliere.

    Args:
        title: Titre du programme

    Returns:
        Motif compile, a utiliser avec search() (correspondance partielle)

    Raises:
        PatternCompileError: Si le motif ne compile pas
    """
    try:
        return re.compile(_TAGS_PREFIX + re.escape(title) + re.escape(_EPISODE_MARKER))
    except re.error as e:
        raise PatternCompileError(title, e) from e


class MoveStatus(Enum):
    """
    Issue d'un deplacement.

    MOVED: Fichier deplace
    PLANNED: Deplacement simule (dry-run)
    FAILED: Echec du renommage, fichier laisse en place
    """

    MOVED = "moved"
    PLANNED = "planned"
    FAILED = "failed"


@dataclass(frozen=True)
class MoveOperation:
    """
    Un deplacement a effectuer, entierement determine par une entree et un fichier.

    Attributs:
        source: Chemin du fichier dans le repertoire racine
        destination_dir: Repertoire "<TID> <Titre>" sous la racine
        destination: Chemin final du fichier
    """

    source: Path
    destination_dir: Path
    destination: Path

    @classmethod
    def for_entry(cls, root_dir: Path, entry: CatalogEntry, filename: str) -> "MoveOperation":
        destination_dir = root_dir / entry.directory_name
        return cls(
            source=root_dir / filename,
            destination_dir=destination_dir,
            destination=destination_dir / filename,
        )


@dataclass
class MoveOutcome:
    """Resultat d'un deplacement pour une entree du catalogue."""

    entry: CatalogEntry
    operation: MoveOperation
    status: MoveStatus
    error: Optional[str] = None


@dataclass
class SortReport:
    """
    Bilan d'un tri.

    Les echecs "best-effort" (creation de repertoire, deplacement) n'arretent
    pas le tri mais restent visibles ici.

    Attributs:
        outcomes: Un MoveOutcome par fichier traite
        pattern_errors: Entrees ignorees car leur motif ne compile pas
        directory_errors: Repertoires de destination non crees
        aborted: True si le repertoire racine n'a pas pu etre liste
        abort_reason: Cause de l'abandon
    """

    outcomes: list[MoveOutcome] = field(default_factory=list)
    pattern_errors: list[str] = field(default_factory=list)
    directory_errors: list[str] = field(default_factory=list)
    aborted: bool = False
    abort_reason: Optional[str] = None

    @property
    def moved_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == MoveStatus.MOVED)

    @property
    def planned_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == MoveStatus.PLANNED)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == MoveStatus.FAILED)


class SorterService:
    """
    Service de tri des fichiers par programme.

    Traite les entrees du catalogue sequentiellement, triees par (TID, titre)
    pour que la resolution des titres qui se recouvrent soit reproductible :
    un fichier deplace par une entree n'est plus visible pour les suivantes.

    Utilisation:
        sorter = SorterService(FileSystemAdapter())
        report = sorter.sort(Path("/records"), entries)
        print(f"{report.moved_count} fichier(s) deplace(s)")
    """

    def __init__(
        self,
        file_system: IFileSystem,
        on_move: Optional[Callable[[MoveOperation], None]] = None,
    ) -> None:
        """
        Initialise le service de tri.

        Args:
            file_system: Adaptateur systeme de fichiers
            on_move: Appele avant chaque deplacement (affichage de la ligne "move")
        """
        self._fs = file_system
        self._on_move = on_move

    def sort(
        self,
        root_dir: Path,
        entries: Iterable[CatalogEntry],
        dry_run: bool = False,
    ) -> SortReport:
        """
        Range les fichiers du repertoire racine par programme.

        Args:
            root_dir: Repertoire a trier
            entries: Programmes du catalogue
            dry_run: Si True, annonce les deplacements sans rien modifier

        Returns:
            SortReport avec le detail de chaque deplacement.
        """
        root_dir = Path(root_dir)
        report = SortReport()

        try:
            listing = self._fs.list_entries(root_dir)
        except DirectoryReadError as e:
            # Abandon silencieux : pas d'erreur distincte du succes pour l'appelant
            logger.warning(f"Tri abandonne: {e}")
            report.aborted = True
            report.abort_reason = str(e)
            return report

        logger.debug(f"{len(listing)} entree(s) dans {root_dir}")
        remaining = list(listing)

        for entry in sorted(entries, key=lambda e: (e.tid, e.title)):
            try:
                pattern = build_title_pattern(entry.title)
            except PatternCompileError as e:
                logger.error(str(e))
                report.pattern_errors.append(entry.title)
                continue

            matches = [name for name in remaining if pattern.search(name)]
            if not matches:
                continue

            destination_dir = root_dir / entry.directory_name
            if not dry_run:
                self._ensure_directory(destination_dir, report)

            for filename in matches:
                operation = MoveOperation.for_entry(root_dir, entry, filename)
                report.outcomes.append(self._move(entry, operation, dry_run))
                remaining.remove(filename)

        logger.info(
            f"Tri termine: {report.moved_count} deplace(s), "
            f"{report.failed_count} echec(s), {report.planned_count} simule(s)"
        )
        return report

    def _ensure_directory(self, destination_dir: Path, report: SortReport) -> None:
        """Cree le repertoire de destination s'il n'existe pas (best-effort)."""
        if self._fs.is_directory(destination_dir):
            return
        try:
            self._fs.make_directory(destination_dir, mode=DIRECTORY_MODE)
            logger.debug(f"Repertoire cree: {destination_dir}")
        except DirectoryCreateError as e:
            # Le deplacement est tente malgre tout
            logger.warning(str(e))
            report.directory_errors.append(str(destination_dir))

    def _move(self, entry: CatalogEntry, operation: MoveOperation, dry_run: bool) -> MoveOutcome:
        if self._on_move is not None:
            self._on_move(operation)

        if dry_run:
            return MoveOutcome(entry=entry, operation=operation, status=MoveStatus.PLANNED)

        try:
            self._fs.rename(operation.source, operation.destination)
        except FileMoveError as e:
            logger.warning(str(e))
            return MoveOutcome(
                entry=entry, operation=operation, status=MoveStatus.FAILED, error=str(e)
            )

        logger.debug(f"Deplace: {operation.source} -> {operation.destination}")
        return MoveOutcome(entry=entry, operation=operation, status=MoveStatus.MOVED)
