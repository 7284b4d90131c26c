"""
Entités du catalogue de programmes.

Un programme du catalogue Syoboi Calendar est identifié par son TID et porte
un titre. Le titre sert à la fois à reconnaître les fichiers enregistrés et à
nommer le répertoire de destination.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntry:
    """
    Un programme du catalogue distant.

    Attributs :
        tid : Identifiant opaque du programme (TID Syoboi, ex: "1234")
        title : Titre du programme, utilisé tel quel (pas de normalisation)
    """

    tid: str
    title: str

    @property
    def directory_name(self) -> str:
        """Nom du répertoire de destination : "<TID> <Titre>"."""
        return f"{self.tid} {self.title}"
