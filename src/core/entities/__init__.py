"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.
They encapsulate business rules and behavior.

Exports:
- Client: Customer identified by a code, with a postal address
- Product: Catalog item with stock and committed quantity counters
- Order: A client's order, owning its lines
- OrderLine: One product + quantity entry within an order
- OrderStatus: Open or shipped
"""

from src.core.entities.catalog import Client, Product
from src.core.entities.order import Order, OrderLine, OrderStatus

__all__ = [
    "Client",
    "Product",
    "Order",
    "OrderLine",
    "OrderStatus",
]
