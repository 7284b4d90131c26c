"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles.
Les erreurs OSError sont traduites en exceptions du domaine.
"""

import os
from pathlib import Path

from syoboi_sorting.core.errors import DirectoryCreateError, DirectoryReadError, FileMoveError
from syoboi_sorting.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Le renommage utilise os.rename : pas de copie inter-filesystem, les
    sous-repertoires de destination sont toujours sous le repertoire racine.
    """

    def list_entries(self, directory: Path) -> list[str]:
        """
        Liste les entrees immediates d'un repertoire, triees par nom.

        Retourne un instantane : les fichiers ajoutes ensuite ne sont pas vus.
        """
        try:
            with os.scandir(directory) as it:
                names = [entry.name for entry in it]
        except OSError as e:
            raise DirectoryReadError(Path(directory), e) from e
        return sorted(names)

    def is_directory(self, path: Path) -> bool:
        """Verifie si un chemin existe et est un repertoire."""
        return path.is_dir()

    def make_directory(self, path: Path, mode: int = 0o777) -> None:
        """Cree un repertoire avec le mode donne (soumis a l'umask)."""
        try:
            path.mkdir(mode=mode)
        except OSError as e:
            raise DirectoryCreateError(path, e) from e

    def rename(self, source: Path, destination: Path) -> None:
        """Renomme un fichier (meme filesystem)."""
        try:
            os.rename(source, destination)
        except OSError as e:
            raise FileMoveError(source, destination, e) from e
