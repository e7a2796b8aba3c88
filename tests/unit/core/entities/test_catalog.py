"""Tests pour les entites Client et Product."""

from src.core.entities import Client, Product


class TestProduct:
    """Disponibilite et controle de stock ponctuel."""

    def test_available_by_default(self):
        assert Product(reference=50).is_available

    def test_unavailable(self):
        assert not Product(reference=51, unavailable=True).is_available

    def test_has_stock_for(self):
        product = Product(reference=50, units_in_stock=10, units_on_order=8)
        assert product.has_stock_for(10)
        assert not product.has_stock_for(11)

    def test_has_stock_ignores_units_on_order(self):
        """Les unites engagees ne reduisent pas le stock controle."""
        product = Product(reference=50, units_in_stock=5, units_on_order=100)
        assert product.has_stock_for(5)


class TestClient:
    def test_client_without_address(self):
        client = Client(code="C4", name="Quatre Vents")
        assert client.address is None
