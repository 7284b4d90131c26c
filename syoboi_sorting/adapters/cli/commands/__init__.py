"""Sous-package CLI commands - re-exporte les commandes publiques."""

from syoboi_sorting.adapters.cli.commands.catalog_command import catalog
from syoboi_sorting.adapters.cli.commands.sort_command import sort

__all__ = [
    "catalog",
    "sort",
]
