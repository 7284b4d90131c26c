"""
Logging de syoboi-sorting via loguru.

Deux destinations sont toujours actives :
- stderr, au niveau choisi par -v/-q ou SYOBOI_LOG_LEVEL
- un fichier JSON (tout depuis DEBUG) avec rotation, pour relire un tri passe

Les lignes " move <src> -> <dst>" ne passent pas par le logger : elles sont
écrites sur stdout par la CLI.
"""

import sys
from pathlib import Path

from loguru import logger

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/syoboi-sorting.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru par la console et le fichier de tri.

    Args :
        log_level : Niveau minimum sur stderr
        log_file : Fichier JSON, son répertoire parent est créé au besoin
        rotation_size : Taille déclenchant la rotation (ex: "10 MB")
        retention_count : Nombre d'archives zip conservées
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=_CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Journal de tri: {log_file} (rotation {rotation_size})")
