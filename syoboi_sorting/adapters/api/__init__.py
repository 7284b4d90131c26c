"""
Clients API externes.

Ce module fournit l'adaptateur pour communiquer avec Syoboi Calendar
(catalogue des programmes TV japonais).

Le client implemente ICatalogClient defini dans core/ports/api_clients.py.
"""

from syoboi_sorting.adapters.api.syoboi_client import (
    SyoboiClient,
    build_user_agent,
    parse_title_medium,
)

__all__ = [
    "SyoboiClient",
    "build_user_agent",
    "parse_title_medium",
]
