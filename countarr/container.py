"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .config import Settings
from .services.quality_parser import QualityParserService
from .services.quality_stats import QualityStatsService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        parser = container.quality_parser()
        stats = container.quality_stats_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Services
    quality_parser = providers.Singleton(QualityParserService)

    quality_stats_service = providers.Factory(
        QualityStatsService,
        parser=quality_parser,
        settings=config,
    )
