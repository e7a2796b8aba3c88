"""
Tests pour les entites Order et OrderLine.

Verifie le statut derive de la date d'expedition et la transition unique
vers l'etat expedie.
"""

from datetime import date

import pytest

from src.core.entities import Order, OrderLine, OrderStatus
from src.core.exceptions import AlreadyShippedError, BusinessRuleError


def _order(**kwargs) -> Order:
    defaults = {"number": 100, "client_code": "C1", "placed_on": date(2024, 3, 1)}
    defaults.update(kwargs)
    return Order(**defaults)


class TestOrderStatus:
    """Statut derive de shipped_on."""

    def test_new_order_is_open(self):
        order = _order()
        assert order.status is OrderStatus.OPEN
        assert not order.is_shipped

    def test_order_with_shipped_on_is_shipped(self):
        order = _order(shipped_on=date(2024, 3, 5))
        assert order.status is OrderStatus.SHIPPED
        assert order.is_shipped

    def test_defaults(self):
        """Remise et frais de port a zero, aucune ligne."""
        order = Order()
        assert order.discount == 0
        assert order.freight == 0
        assert order.lines == []


class TestMarkShipped:
    """Transition OPEN -> SHIPPED."""

    def test_mark_shipped_sets_date(self):
        order = _order()
        order.mark_shipped(date(2024, 3, 5))
        assert order.shipped_on == date(2024, 3, 5)

    def test_mark_shipped_twice_raises(self):
        """La transition est terminale."""
        order = _order()
        order.mark_shipped(date(2024, 3, 5))

        with pytest.raises(AlreadyShippedError) as exc_info:
            order.mark_shipped(date(2024, 3, 6))

        assert order.shipped_on == date(2024, 3, 5)
        assert exc_info.value.order_number == 100

    def test_already_shipped_is_business_rule_error(self):
        with pytest.raises(BusinessRuleError, match="order already shipped"):
            _order(shipped_on=date(2024, 3, 5)).ensure_open()

    def test_ensure_open_on_open_order(self):
        _order().ensure_open()


class TestQuantities:
    """Agregats sur les lignes."""

    def test_quantities_by_product_sums_duplicates(self):
        order = _order(
            lines=[
                OrderLine(id=1, order_number=100, product_ref=50, quantity=2),
                OrderLine(id=2, order_number=100, product_ref=52, quantity=1),
                OrderLine(id=3, order_number=100, product_ref=50, quantity=3),
            ]
        )
        assert order.quantities_by_product() == {50: 5, 52: 1}
        assert order.total_quantity == 6

    def test_no_lines(self):
        assert _order().quantities_by_product() == {}
        assert _order().total_quantity == 0
