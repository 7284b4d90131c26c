"""
Interfaces ports pour les clients API.

Interface abstraite (port) définissant le contrat d'accès au catalogue de
programmes. L'implémentation concrète (adaptateur) interroge Syoboi Calendar.
"""

from abc import ABC, abstractmethod

from syoboi_sorting.core.entities import CatalogEntry


class ICatalogClient(ABC):
    """
    Interface pour la récupération du catalogue de programmes.

    Les implémentations effectuent un unique appel distant, sans retry ni cache.
    """

    @abstractmethod
    async def fetch_titles(self) -> list[CatalogEntry]:
        """
        Récupère l'ensemble des programmes du catalogue.

        Retourne :
            Liste de CatalogEntry, sans garantie d'ordre

        Lève :
            NetworkError : Échec de transport
            UnexpectedStatusError : Code HTTP différent de 200
            DecodeError : Corps illisible ou de forme inattendue
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libère les ressources réseau du client."""
        ...
