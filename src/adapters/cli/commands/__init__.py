"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.order_commands import (
    add_line,
    create_order,
    ship_order,
    show_order,
)
from src.adapters.cli.commands.catalog_commands import (
    import_catalog,
)

__all__ = [
    # commandes
    "create_order",
    "add_line",
    "ship_order",
    "show_order",
    # catalogue
    "import_catalog",
]
