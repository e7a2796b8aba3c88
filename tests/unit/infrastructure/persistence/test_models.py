"""
Tests pour les modeles SQLModel de persistance.

Verifie les valeurs par defaut des compteurs et des montants.
"""

from datetime import date
from decimal import Decimal

from src.infrastructure.persistence.models import (
    ClientModel,
    OrderLineModel,
    OrderModel,
    ProductModel,
)


class TestProductModel:
    """Tests pour ProductModel."""

    def test_counters_default_to_zero(self):
        model = ProductModel(reference=50, name="Chai")
        assert model.units_in_stock == 0
        assert model.units_on_order == 0
        assert model.reorder_level == 0
        assert model.unavailable is False

    def test_unit_price(self):
        model = ProductModel(reference=50, name="Chai", unit_price=Decimal("18.00"))
        assert model.unit_price == Decimal("18.00")


class TestOrderModel:
    """Tests pour OrderModel."""

    def test_number_assigned_by_store(self):
        """Le numero reste vide tant que la commande n'est pas inseree."""
        model = OrderModel(client_code="C1", placed_on=date(2024, 3, 1))
        assert model.number is None

    def test_open_by_default(self):
        model = OrderModel(client_code="C1", placed_on=date(2024, 3, 1))
        assert model.shipped_on is None
        assert model.discount == Decimal("0")
        assert model.freight == Decimal("0")

    def test_shipping_address_fields_nullable(self):
        model = OrderModel(client_code="C1", placed_on=date(2024, 3, 1))
        assert model.ship_street is None
        assert model.ship_city is None


class TestOrderLineModel:
    def test_line_fields(self):
        model = OrderLineModel(order_number=100, product_ref=50, quantity=3)
        assert model.id is None
        assert model.quantity == 3


class TestClientModel:
    def test_address_fields_nullable(self):
        model = ClientModel(code="C4", name="Quatre Vents")
        assert model.address_street is None
        assert model.address_country is None
