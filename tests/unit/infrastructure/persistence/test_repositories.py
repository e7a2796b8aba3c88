"""
Tests pour les repositories SQLModel.

Chaque test travaille dans une session ouverte par l'unit of work,
sur le jeu de donnees de reference (voir conftest).
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlmodel import Session, select

from src.core.entities import Client, Order, OrderLine, Product
from src.core.exceptions import NotFoundError, ValidationError
from src.core.value_objects import PostalAddress
from src.infrastructure.persistence.models import OrderLineModel


class TestClientRepository:
    """Tests pour SQLModelClientRepository."""

    def test_get_by_code_with_address(self, uow):
        with uow:
            client = uow.clients.get_by_code("C1")

        assert client.name == "Comptoir Un"
        assert client.address == PostalAddress(
            street="12 rue des Lilas",
            city="Paris",
            postal_code="75001",
            country="France",
        )

    def test_get_by_code_without_address(self, uow):
        with uow:
            assert uow.clients.get_by_code("C4").address is None

    def test_get_by_code_not_found(self, uow):
        with uow:
            assert uow.clients.get_by_code("ZZZZZ") is None

    @pytest.mark.parametrize(
        "code, expected",
        [("C1", 150), ("C2", 6), ("C3", 100), ("C4", 0), ("ZZZZZ", 0)],
    )
    def test_total_ordered_quantity(self, uow, code, expected):
        """Somme des quantites sur toutes les commandes, expediees ou non."""
        with uow:
            assert uow.clients.total_ordered_quantity(code) == expected

    def test_save_updates_existing(self, uow):
        with uow:
            uow.clients.save(Client(code="C4", name="Quatre Vents SA"))
            uow.commit()
        with uow:
            assert uow.clients.get_by_code("C4").name == "Quatre Vents SA"


class TestProductRepository:
    """Tests pour SQLModelProductRepository."""

    def test_get_by_reference(self, uow):
        with uow:
            product = uow.products.get_by_reference(51)

        assert product.name == "Chang"
        assert product.unavailable is True
        assert product.units_in_stock == 20
        assert product.unit_price == Decimal("19.00")

    def test_get_by_reference_not_found(self, uow):
        with uow:
            assert uow.products.get_by_reference(99999) is None

    def test_increment_units_on_order(self, uow):
        with uow:
            uow.products.increment_units_on_order(50, 4)
            uow.products.increment_units_on_order(50, 1)
            uow.commit()
        with uow:
            assert uow.products.get_by_reference(50).units_on_order == 5

    def test_decrement_units_in_stock_below_zero(self, uow):
        """Aucun plancher n'est applique."""
        with uow:
            uow.products.decrement_units_in_stock(52, 5)
            uow.commit()
        with uow:
            assert uow.products.get_by_reference(52).units_in_stock == -2

    def test_counters_on_unknown_product(self, uow):
        with uow:
            with pytest.raises(NotFoundError):
                uow.products.increment_units_on_order(99999, 1)

    def test_save_new_product(self, uow):
        with uow:
            uow.products.save(Product(reference=70, name="Ikura", units_in_stock=31))
            uow.commit()
        with uow:
            assert uow.products.get_by_reference(70).units_in_stock == 31


class TestOrderRepository:
    """Tests pour SQLModelOrderRepository."""

    def test_get_by_number_loads_lines(self, uow):
        with uow:
            order = uow.orders.get_by_number(200)

        assert order.client_code == "C1"
        assert order.shipped_on == date(2024, 1, 15)
        assert sorted(line.quantity for line in order.lines) == [50, 100]

    def test_get_by_number_not_found(self, uow):
        with uow:
            assert uow.orders.get_by_number(99999) is None

    def test_add_assigns_number(self, uow):
        address = PostalAddress(street="1 rue Haute", city="Nantes")
        with uow:
            order = uow.orders.add(
                Order(client_code="C4", placed_on=date(2024, 5, 1), shipping_address=address)
            )
            uow.commit()

        assert order.number is not None
        with uow:
            loaded = uow.orders.get_by_number(order.number)
        assert loaded.shipping_address == address
        assert loaded.placed_on == date(2024, 5, 1)

    def test_add_rejects_caller_supplied_number(self, uow):
        with uow:
            with pytest.raises(ValidationError):
                uow.orders.add(Order(number=12345, client_code="C4", placed_on=date(2024, 5, 1)))

    def test_mark_shipped(self, uow):
        with uow:
            uow.orders.mark_shipped(100, date(2024, 6, 1))
            uow.commit()
        with uow:
            assert uow.orders.get_by_number(100).shipped_on == date(2024, 6, 1)

    def test_mark_shipped_unknown(self, uow):
        with uow:
            with pytest.raises(NotFoundError):
                uow.orders.mark_shipped(99999, date(2024, 6, 1))

    def test_delete_removes_lines(self, uow, engine):
        """Supprimer une commande supprime ses lignes : aucune orpheline."""
        with uow:
            assert uow.orders.delete(101) is True
            uow.commit()

        with uow:
            assert uow.orders.get_by_number(101) is None
            assert uow.lines.list_by_order(101) == []
        with Session(engine) as session:
            orphans = session.exec(
                select(OrderLineModel).where(OrderLineModel.order_number == 101)
            ).all()
        assert orphans == []

    def test_delete_unknown(self, uow):
        with uow:
            assert uow.orders.delete(99999) is False

    def test_list_by_client(self, uow):
        with uow:
            orders = uow.orders.list_by_client("C2")
        assert [order.number for order in orders] == [100, 101]


class TestOrderLineRepository:
    """Tests pour SQLModelOrderLineRepository."""

    def test_add_assigns_id(self, uow):
        with uow:
            line = uow.lines.add(OrderLine(order_number=100, product_ref=50, quantity=2))
            uow.commit()

        assert line.id is not None
        with uow:
            lines = uow.lines.list_by_order(100)
        assert [(saved.id, saved.quantity) for saved in lines] == [(line.id, 2)]

    def test_list_by_order_in_insertion_order(self, uow):
        with uow:
            lines = uow.lines.list_by_order(101)
        assert [line.quantity for line in lines] == [2, 3, 1]
