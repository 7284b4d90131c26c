"""
Entités métier du domaine.

Exports:
- CatalogEntry: Un programme (TID + titre) du catalogue distant
"""

from syoboi_sorting.core.entities.catalog import CatalogEntry

__all__ = [
    "CatalogEntry",
]
