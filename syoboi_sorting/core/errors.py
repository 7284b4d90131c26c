"""
Hiérarchie d'exceptions de syoboi-sorting.

Les erreurs de la phase de démarrage (configuration, récupération du catalogue)
sont fatales. Les erreurs de la phase de tri sont locales à une entrée ou à un
fichier et n'interrompent pas le traitement, sauf l'échec de lecture du
répertoire racine qui abandonne le tri.
"""

from pathlib import Path
from typing import Optional


class SyoboiSortingError(Exception):
    """Exception de base de l'application."""


class ConfigReadError(SyoboiSortingError):
    """
    Le fichier de configuration est absent, illisible ou mal formé.

    Attributes:
        path: Chemin du fichier de configuration concerné
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Lecture de la configuration impossible ({path}): {reason}")


class CatalogError(SyoboiSortingError):
    """Erreur lors de la récupération du catalogue de titres."""


class NetworkError(CatalogError):
    """Échec de transport lors de l'appel à l'API (DNS, connexion, timeout)."""


class UnexpectedStatusError(CatalogError):
    """
    L'API a répondu avec un code HTTP différent de 200.

    Attributes:
        status_code: Code HTTP observé
    """

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Code HTTP inattendu: {status_code}")


class DecodeError(CatalogError):
    """Le corps de la réponse n'est pas du JSON ou n'a pas la forme attendue."""


class DirectoryReadError(SyoboiSortingError):
    """Le répertoire racine ne peut pas être listé."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None) -> None:
        self.path = path
        super().__init__(f"Lecture du répertoire impossible: {path} ({cause})")


class PatternCompileError(SyoboiSortingError):
    """Le motif de recherche construit depuis un titre ne compile pas."""

    def __init__(self, title: str, cause: Optional[BaseException] = None) -> None:
        self.title = title
        super().__init__(f"Motif invalide pour le titre {title!r}: {cause}")


class DirectoryCreateError(SyoboiSortingError):
    """Le répertoire de destination n'a pas pu être créé."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None) -> None:
        self.path = path
        super().__init__(f"Création du répertoire impossible: {path} ({cause})")


class FileMoveError(SyoboiSortingError):
    """Le déplacement d'un fichier a échoué."""

    def __init__(
        self, source: Path, destination: Path, cause: Optional[BaseException] = None
    ) -> None:
        self.source = source
        self.destination = destination
        super().__init__(f"Déplacement impossible: {source} -> {destination} ({cause})")
