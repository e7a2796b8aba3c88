"""
Fixtures pytest partagees pour les tests Comptoirs.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine SQLite en memoire, tables creees
- Jeu de donnees de reference (clients, produits, commandes)
- Unit of work et services branches sur ce jeu de donnees
- Settings de test avec chemins temporaires
- Container DI branche sur une base fichier temporaire

Jeu de donnees (seed_test_data):
- C1 a deja commande 150 articles (commande 200, expediee)
- C2 a une commande ouverte sans ligne (100) et une avec lignes (101)
- C3 a deja commande exactement 100 articles (commande 300, expediee)
- C4 n'a ni adresse ni commande
- Produit 50 : stock 10 ; 51 : indisponible, stock 20 ; 52 : stock 3
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from dependency_injector import providers
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel

from src.config import Settings
from src.container import Container
from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.models import (
    ClientModel,
    OrderLineModel,
    OrderModel,
    ProductModel,
)
from src.infrastructure.persistence.unit_of_work import SQLModelUnitOfWork
from src.services.line_service import LineService
from src.services.order_service import OrderService

OPEN_ORDER = 100
OPEN_ORDER_WITH_LINES = 101
SHIPPED_ORDER = 200
SHIPPED_ORDER_C3 = 300
AVAILABLE_PRODUCT = 50
UNAVAILABLE_PRODUCT = 51
LOW_STOCK_PRODUCT = 52


def seed_test_data(engine: Engine) -> None:
    """Insere le jeu de donnees de reference directement en base."""
    with Session(engine) as session:
        session.add_all(
            [
                ClientModel(
                    code="C1",
                    name="Comptoir Un",
                    address_street="12 rue des Lilas",
                    address_city="Paris",
                    address_postal_code="75001",
                    address_country="France",
                ),
                ClientModel(
                    code="C2",
                    name="Deux Freres",
                    address_street="3 quai Rambaud",
                    address_city="Lyon",
                    address_postal_code="69002",
                    address_country="France",
                ),
                ClientModel(
                    code="C3",
                    name="Trois Epis",
                    address_street="8 place du Marche",
                    address_city="Albi",
                ),
                ClientModel(code="C4", name="Quatre Vents"),
            ]
        )
        session.add_all(
            [
                ProductModel(reference=50, name="Chai", unit_price=Decimal("18.00"), units_in_stock=10),
                ProductModel(
                    reference=51, name="Chang", unit_price=Decimal("19.00"),
                    units_in_stock=20, unavailable=True,
                ),
                ProductModel(reference=52, name="Aniseed Syrup", unit_price=Decimal("10.00"), units_in_stock=3),
                ProductModel(reference=60, name="Tofu", unit_price=Decimal("23.25"), units_in_stock=500),
                ProductModel(reference=61, name="Konbu", unit_price=Decimal("6.00"), units_in_stock=500),
            ]
        )
        session.flush()
        session.add_all(
            [
                OrderModel(number=OPEN_ORDER, client_code="C2", placed_on=date(2024, 3, 1)),
                OrderModel(number=OPEN_ORDER_WITH_LINES, client_code="C2", placed_on=date(2024, 3, 2)),
                OrderModel(
                    number=SHIPPED_ORDER, client_code="C1",
                    placed_on=date(2024, 1, 10), shipped_on=date(2024, 1, 15),
                ),
                OrderModel(
                    number=SHIPPED_ORDER_C3, client_code="C3",
                    placed_on=date(2024, 2, 1), shipped_on=date(2024, 2, 3),
                ),
            ]
        )
        session.flush()
        session.add_all(
            [
                OrderLineModel(order_number=OPEN_ORDER_WITH_LINES, product_ref=50, quantity=2),
                OrderLineModel(order_number=OPEN_ORDER_WITH_LINES, product_ref=50, quantity=3),
                OrderLineModel(order_number=OPEN_ORDER_WITH_LINES, product_ref=52, quantity=1),
                OrderLineModel(order_number=SHIPPED_ORDER, product_ref=60, quantity=100),
                OrderLineModel(order_number=SHIPPED_ORDER, product_ref=61, quantity=50),
                OrderLineModel(order_number=SHIPPED_ORDER_C3, product_ref=60, quantity=100),
            ]
        )
        session.commit()


@pytest.fixture
def engine() -> Engine:
    """Engine SQLite en memoire avec les tables creees et le jeu de donnees."""
    engine = init_db(create_db_engine("sqlite://"))
    seed_test_data(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def empty_engine() -> Engine:
    """Engine SQLite en memoire avec les tables creees, sans donnees."""
    engine = init_db(create_db_engine("sqlite://"))
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def uow(engine: Engine) -> SQLModelUnitOfWork:
    return SQLModelUnitOfWork(engine)


@pytest.fixture
def order_service(uow: SQLModelUnitOfWork) -> OrderService:
    return OrderService(uow=uow)


@pytest.fixture
def line_service(uow: SQLModelUnitOfWork) -> LineService:
    return LineService(uow=uow)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour une base fichier et un log isoles
    pour chaque test.
    """
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def seeded_container(test_settings: Settings):
    """Container pointant vers une base fichier temporaire alimentee."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.database.init()
    seed_test_data(container.engine())
    yield container
    container.database.shutdown()
    container.engine().dispose()
