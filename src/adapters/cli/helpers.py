"""
Utilitaires partages pour les commandes CLI de Comptoirs.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container initialise
- exit_on_domain_error : decorateur traduisant les erreurs metier en code retour 1
- render_order : affichage d'une commande et de ses lignes
"""

from functools import wraps

import typer
from rich.console import Console
from rich.table import Table

from src.container import Container
from src.core.entities import Order
from src.core.exceptions import ComptoirsError

console = Console()


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), cree les tables manquantes.

    Usage:
        @with_container()
        def my_command(container, ...):
            service = container.order_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def exit_on_domain_error(func):
    """
    Affiche les erreurs metier en rouge et termine avec le code 1.

    Les autres exceptions remontent telles quelles.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ComptoirsError as e:
            console.print(f"[red]Erreur ({e.kind}) :[/red] {e}")
            raise typer.Exit(code=1) from e
    return wrapper


def render_order(order: Order) -> None:
    """Affiche l'en-tete d'une commande puis ses lignes dans une table."""
    status = "expediee" if order.is_shipped else "ouverte"
    console.print(f"[bold]Commande {order.number}[/bold] ({status}) - client {order.client_code}")
    console.print(f"  Saisie le : {order.placed_on}")
    if order.shipped_on:
        console.print(f"  Expediee le : {order.shipped_on}")
    if order.shipping_address:
        console.print(f"  Livraison : {order.shipping_address.label}")
    console.print(f"  Remise : {order.discount}")

    if not order.lines:
        console.print("  [dim]Aucune ligne[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Ligne", justify="right")
    table.add_column("Produit", justify="right")
    table.add_column("Quantite", justify="right")
    for line in order.lines:
        table.add_row(str(line.id), str(line.product_ref), str(line.quantity))
    console.print(table)
