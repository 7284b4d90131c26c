"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

- ICatalogClient : Récupération du catalogue de programmes
- IFileSystem : Listage, création de répertoire, renommage
"""

from syoboi_sorting.core.ports.api_clients import ICatalogClient
from syoboi_sorting.core.ports.file_system import IFileSystem

__all__ = [
    "ICatalogClient",
    "IFileSystem",
]
