"""
Fixtures pytest partagees pour les tests syoboi-sorting.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock de l'interface IFileSystem
- Repertoire racine temporaire et config.json associe
- Entrees de catalogue types
"""

import json
from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from loguru import logger

from syoboi_sorting.core.entities import CatalogEntry
from syoboi_sorting.core.ports.file_system import IFileSystem


@pytest.fixture(autouse=True)
def _no_file_logging(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Redirige le fichier de log vers tmp_path pour chaque test."""
    monkeypatch.setenv("SYOBOI_LOG_FILE", str(tmp_path / "logs" / "test.log"))
    yield
    logger.remove()


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut: repertoire vide, aucun repertoire de destination existant.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.list_entries.return_value = []
    mock.is_directory.return_value = False
    mock.make_directory.return_value = None
    mock.rename.return_value = None
    return mock


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Repertoire racine temporaire a trier."""
    root = tmp_path / "records"
    root.mkdir()
    return root


@pytest.fixture
def config_file(tmp_path: Path, root_dir: Path) -> Path:
    """config.json pointant vers root_dir."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rootDir": str(root_dir)}), encoding="utf-8")
    return path


@pytest.fixture
def entry_a() -> CatalogEntry:
    """Entree de catalogue type."""
    return CatalogEntry(tid="1234", title="TitleA")


@pytest.fixture
def entry_b() -> CatalogEntry:
    """Seconde entree de catalogue."""
    return CatalogEntry(tid="5678", title="けいおん!")
