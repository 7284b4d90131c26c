"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI :
parametres, client Syoboi, adaptateur systeme de fichiers et services.
"""

from dependency_injector import containers, providers

from . import __version__
from .adapters.api.syoboi_client import SyoboiClient, build_user_agent
from .adapters.file_system import FileSystemAdapter
from .config import Settings
from .services.sorter import SorterService
from .services.workflow import SortingWorkflow


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        workflow = container.sorting_workflow()
        sorter = container.sorter_service(on_move=print_move)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # User-Agent calcule une seule fois par processus
    user_agent = providers.Singleton(build_user_agent, version=__version__)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)

    # Client API - Factory : un client par execution, ferme apres usage
    catalog_client = providers.Factory(
        SyoboiClient,
        user_agent=user_agent,
        url=config.provided.api_url,
        timeout=config.provided.request_timeout,
    )

    # Services
    # Utiliser: container.sorter_service(on_move=callback)
    sorter_service = providers.Factory(
        SorterService,
        file_system=file_system,
    )

    sorting_workflow = providers.Factory(
        SortingWorkflow,
        catalog_client=catalog_client,
        sorter=sorter_service,
    )
