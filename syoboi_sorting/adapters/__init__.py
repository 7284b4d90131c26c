"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- api/ : Client API externe (Syoboi Calendar)
- file_system : Opérations sur le système de fichiers

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from syoboi_sorting.adapters.file_system import FileSystemAdapter

__all__ = [
    "FileSystemAdapter",
]
