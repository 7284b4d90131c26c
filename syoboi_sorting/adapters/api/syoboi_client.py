"""
Client Syoboi Calendar pour la récupération du catalogue de programmes.

Implemente l'interface ICatalogClient en interrogeant l'endpoint
json.php?Req=TitleMedium, qui renvoie la liste des programmes sous la forme:

    {"Titles": {"<cle>": {"TID": "1234", "Title": "...", ...}, ...}}

Un seul appel, sans retry ni cache.

Usage:
    client = SyoboiClient(user_agent=build_user_agent(__version__))
    entries = await client.fetch_titles()
    await client.close()
"""

import json
import platform
from typing import Any, Optional

import httpx
from loguru import logger

from syoboi_sorting.config import TITLE_MEDIUM_URL
from syoboi_sorting.core.entities import CatalogEntry
from syoboi_sorting.core.errors import DecodeError, NetworkError, UnexpectedStatusError
from syoboi_sorting.core.ports.api_clients import ICatalogClient


def build_user_agent(version: str) -> str:
    """
    Construit la valeur du header User-Agent.

    Calculee une seule fois au demarrage puis passee explicitement au client.

    Args:
        version: Version de l'application

    Returns:
        Chaine de la forme "syoboi-sorting/1.0.0 (Python 3.12.1)"
    """
    return f"syoboi-sorting/{version} (Python {platform.python_version()})"


def parse_title_medium(payload: Any) -> list[CatalogEntry]:
    """
    Extrait les programmes d'une reponse TitleMedium deja decodee.

    Les cles du mapping "Titles" sont ignorees ; seules les valeurs
    (TID, Title) sont conservees.

    Args:
        payload: Objet JSON decode

    Returns:
        Liste de CatalogEntry dans l'ordre d'iteration du mapping

    Raises:
        DecodeError: Si la forme ne correspond pas a {"Titles": {..: {TID, Title}}}
    """
    if not isinstance(payload, dict) or "Titles" not in payload:
        raise DecodeError("Champ 'Titles' absent de la reponse TitleMedium")

    titles = payload["Titles"]
    if titles is None:
        return []
    if not isinstance(titles, dict):
        raise DecodeError("Le champ 'Titles' n'est pas un objet JSON")

    entries = []
    for key, item in titles.items():
        if not isinstance(item, dict):
            raise DecodeError(f"Entree {key!r} invalide: objet attendu")
        tid = item.get("TID")
        title = item.get("Title")
        if not isinstance(tid, str) or not isinstance(title, str):
            raise DecodeError(f"Entree {key!r} invalide: TID et Title doivent etre des chaines")
        entries.append(CatalogEntry(tid=tid, title=title))

    return entries


class SyoboiClient(ICatalogClient):
    """
    Client API Syoboi Calendar.

    Implemente ICatalogClient avec:
    - Un unique GET sur l'endpoint TitleMedium
    - Un User-Agent identifiant fourni par l'appelant
    - Traduction des erreurs httpx/JSON en erreurs du domaine

    Example:
        async with SyoboiClient(user_agent="syoboi-sorting/1.0.0 (Python 3.12)") as client:
            entries = await client.fetch_titles()
    """

    def __init__(
        self,
        user_agent: str,
        url: str = TITLE_MEDIUM_URL,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            user_agent: Valeur du header User-Agent
            url: URL complete de l'endpoint TitleMedium
            timeout: Timeout des requetes en secondes
        """
        self._user_agent = user_agent
        self._url = url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self._user_agent, "Accept": "application/json"},
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "syoboi"

    async def fetch_titles(self) -> list[CatalogEntry]:
        """
        Recupere le catalogue complet des programmes.

        Returns:
            Liste de CatalogEntry (ordre non garanti)

        Raises:
            NetworkError: Echec de transport ou trop de redirections
            UnexpectedStatusError: Code HTTP different de 200
            DecodeError: Corps mal encode, non JSON ou de forme inattendue
        """
        client = self._get_client()
        logger.debug(f"GET {self._url}")

        try:
            response = await client.get(self._url)
        except httpx.DecodingError as e:
            raise DecodeError(f"Corps TitleMedium illisible: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"Appel TitleMedium impossible: {e}") from e

        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code)

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Reponse TitleMedium non JSON: {e}") from e

        entries = parse_title_medium(payload)
        logger.info(f"{len(entries)} programme(s) recupere(s) depuis Syoboi Calendar")
        return entries

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "SyoboiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
