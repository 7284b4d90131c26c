"""
Interfaces ports pour le système de fichiers.

Interface abstraite (port) définissant les opérations fichiers nécessaires au tri :
listage d'un répertoire, création de répertoire et renommage.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IFileSystem(ABC):
    """
    Interface pour les opérations sur le système de fichiers.

    Contrairement à un adaptateur "best-effort", chaque opération lève une
    exception du domaine en cas d'échec : c'est l'appelant qui décide si
    l'erreur est fatale ou simplement consignée.
    """

    @abstractmethod
    def list_entries(self, directory: Path) -> list[str]:
        """
        Liste les noms des entrées immédiates d'un répertoire.

        Args :
            directory : Répertoire à lister (non récursif)

        Retourne :
            Noms des entrées triés par ordre alphabétique

        Lève :
            DirectoryReadError : Si le répertoire ne peut pas être lu
        """
        ...

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """Vérifie si un chemin existe et est un répertoire."""
        ...

    @abstractmethod
    def make_directory(self, path: Path, mode: int = 0o777) -> None:
        """
        Crée un répertoire (un seul niveau).

        Lève :
            DirectoryCreateError : Si la création échoue
        """
        ...

    @abstractmethod
    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme (déplace) un fichier.

        Lève :
            FileMoveError : Si le renommage échoue
        """
        ...
