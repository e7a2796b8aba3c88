"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Les services sont des Factory : chacun recoit une unit of work neuve,
qui ouvre sa propre session a chaque operation.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.unit_of_work import SQLModelUnitOfWork
from .services.catalog_importer import CatalogImporter
from .services.line_service import LineService
from .services.order_service import OrderService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        order = container.order_service().create_order("ALFKI")

    En test, surcharger la configuration avant le premier acces a l'engine :
        container.config.override(providers.Object(test_settings))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine partage par toutes les sessions
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    # Database - Resource pour initialisation unique des tables
    database = providers.Resource(init_db, engine=engine)

    # Unit of work - Factory pour une transaction independante par service
    unit_of_work = providers.Factory(SQLModelUnitOfWork, engine=engine)

    # Services metier
    order_service = providers.Factory(
        OrderService,
        uow=unit_of_work,
        discount_threshold=config.provided.discount_threshold,
        loyalty_discount=config.provided.loyalty_discount,
    )
    line_service = providers.Factory(LineService, uow=unit_of_work)
    catalog_importer = providers.Factory(CatalogImporter, uow=unit_of_work)
