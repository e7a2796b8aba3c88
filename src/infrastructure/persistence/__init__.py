"""
Module de persistance pour Comptoirs.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports repository
- unit_of_work.py : Transaction partagee par les repositories d'une operation

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from src.infrastructure.persistence import create_db_engine, init_db
    from src.infrastructure.persistence import SQLModelUnitOfWork

    engine = init_db(create_db_engine("sqlite:///comptoirs.db"))
    with SQLModelUnitOfWork(engine) as uow:
        client = uow.clients.get_by_code("ALFKI")
"""

from src.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
)
from src.infrastructure.persistence.models import (
    ClientModel,
    OrderLineModel,
    OrderModel,
    ProductModel,
)
from src.infrastructure.persistence.unit_of_work import SQLModelUnitOfWork

__all__ = [
    "create_db_engine",
    "init_db",
    "ClientModel",
    "ProductModel",
    "OrderModel",
    "OrderLineModel",
    "SQLModelUnitOfWork",
]
