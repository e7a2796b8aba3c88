"""
Commandes CLI des commandes clients : creation, ajout de ligne, expedition, consultation.
"""

from typing import Annotated

import typer

from src.adapters.cli.helpers import (
    console,
    exit_on_domain_error,
    render_order,
    with_container,
)


def create_order(
    client_code: Annotated[str, typer.Argument(help="Code du client")],
) -> None:
    """Enregistre une nouvelle commande pour un client."""
    _create_order(client_code)


@exit_on_domain_error
@with_container()
def _create_order(container, client_code: str) -> None:
    order = container.order_service().create_order(client_code)
    console.print(f"[green]Commande {order.number} creee[/green] pour {order.client_code}")
    if order.discount:
        console.print(f"  Remise fidelite : {order.discount}")


def add_line(
    order_number: Annotated[int, typer.Argument(help="Numero de la commande")],
    product_ref: Annotated[int, typer.Argument(help="Reference du produit")],
    quantity: Annotated[int, typer.Argument(help="Quantite commandee")],
) -> None:
    """Ajoute une ligne a une commande ouverte."""
    _add_line(order_number, product_ref, quantity)


@exit_on_domain_error
@with_container()
def _add_line(container, order_number: int, product_ref: int, quantity: int) -> None:
    line = container.line_service().add_line(order_number, product_ref, quantity)
    console.print(
        f"[green]Ligne {line.id} ajoutee[/green] a la commande {order_number} : "
        f"{quantity} x produit {product_ref}"
    )


def ship_order(
    order_number: Annotated[int, typer.Argument(help="Numero de la commande")],
) -> None:
    """Enregistre l'expedition d'une commande."""
    _ship_order(order_number)


@exit_on_domain_error
@with_container()
def _ship_order(container, order_number: int) -> None:
    order = container.order_service().ship_order(order_number)
    console.print(f"[green]Commande {order.number} expediee[/green] le {order.shipped_on}")


def show_order(
    order_number: Annotated[int, typer.Argument(help="Numero de la commande")],
) -> None:
    """Affiche une commande et ses lignes."""
    _show_order(order_number)


@exit_on_domain_error
@with_container()
def _show_order(container, order_number: int) -> None:
    render_order(container.order_service().get_order(order_number))
