"""
Modeles SQLModel pour la base de donnees Comptoirs.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- clients: Annuaire clients, adresse postale a plat
- products: Catalogue produits et compteurs de stock
- orders: Commandes, adresse de livraison a plat
- order_lines: Lignes de commande, supprimees avec leur commande

Les adresses postales (objet valeur) sont stockees colonne par colonne,
prefixees par address_ pour le client et ship_ pour la commande.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, SQLModel


class ClientModel(SQLModel, table=True):
    """Modele representant un client."""

    __tablename__ = "clients"

    code: str = Field(primary_key=True, max_length=5)
    name: str = Field(max_length=40)
    contact: str | None = Field(default=None, max_length=30)
    phone: str | None = Field(default=None, max_length=24)
    address_street: str | None = Field(default=None, max_length=60)
    address_city: str | None = Field(default=None, max_length=15)
    address_region: str | None = Field(default=None, max_length=15)
    address_postal_code: str | None = Field(default=None, max_length=10)
    address_country: str | None = Field(default=None, max_length=15)


class ProductModel(SQLModel, table=True):
    """
    Modele representant un produit du catalogue.

    units_on_order est la quantite engagee sur des lignes de commande,
    units_in_stock n'est decremente qu'a l'expedition.
    """

    __tablename__ = "products"

    reference: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True, max_length=40)
    unit_price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    units_in_stock: int = Field(default=0)
    units_on_order: int = Field(default=0)
    reorder_level: int = Field(default=0)
    unavailable: bool = Field(default=False)


class OrderModel(SQLModel, table=True):
    """
    Modele representant une commande.

    Le numero est attribue par la base (autoincrement).
    shipped_on a NULL signifie commande ouverte.
    """

    __tablename__ = "orders"

    number: int | None = Field(default=None, primary_key=True)
    client_code: str = Field(foreign_key="clients.code", index=True)
    placed_on: date
    shipped_on: date | None = Field(default=None)
    freight: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=2)
    discount: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    recipient: str | None = Field(default=None, max_length=40)
    ship_street: str | None = Field(default=None, max_length=60)
    ship_city: str | None = Field(default=None, max_length=15)
    ship_region: str | None = Field(default=None, max_length=15)
    ship_postal_code: str | None = Field(default=None, max_length=10)
    ship_country: str | None = Field(default=None, max_length=15)


class OrderLineModel(SQLModel, table=True):
    """
    Modele representant une ligne de commande.

    Liee a sa commande par order_number (foreign key, ON DELETE CASCADE).
    """

    __tablename__ = "order_lines"

    id: int | None = Field(default=None, primary_key=True)
    order_number: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("orders.number", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    product_ref: int = Field(foreign_key="products.reference", index=True)
    quantity: int
