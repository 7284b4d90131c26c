"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container en premier argument
- print_move : affichage de la ligne " move <src> -> <dst>" sur stdout
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from syoboi_sorting.container import Container
from syoboi_sorting.services.sorter import MoveOperation

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(table)
    """
    loguru_logger.disable("syoboi_sorting")
    try:
        yield
    finally:
        loguru_logger.enable("syoboi_sorting")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container()
        async def my_command(container, ...):
            settings = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def print_move(operation: MoveOperation) -> None:
    """Affiche un deplacement sur stdout."""
    typer.echo(f" move {operation.source} -> {operation.destination}")
