"""
Entités commande et ligne de commande.

Une commande possede ses lignes : elles sont creees uniquement tant que la
commande est ouverte et disparaissent avec elle. Le passage a l'etat expedie
se fait une seule fois et est definitif.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from src.core.exceptions import AlreadyShippedError
from src.core.value_objects import PostalAddress


class OrderStatus(Enum):
    """Statut d'une commande, derive de la date d'expedition."""

    OPEN = "open"
    SHIPPED = "shipped"


@dataclass
class OrderLine:
    """
    Ligne de commande : un produit et une quantite.

    Attributs :
        id : Identifiant attribue par la base a l'insertion
        order_number : Numero de la commande proprietaire
        product_ref : Reference du produit commande
        quantity : Quantite commandee (strictement positive)
    """

    id: Optional[int] = None
    order_number: Optional[int] = None
    product_ref: int = 0
    quantity: int = 0


@dataclass
class Order:
    """
    Commande d'un client.

    Attributs :
        number : Numero attribue par la base a l'insertion
        client_code : Code du client proprietaire
        placed_on : Date de saisie
        shipped_on : Date d'expedition (None tant que la commande est ouverte)
        shipping_address : Adresse de livraison, copiee depuis le client
        recipient : Destinataire
        discount : Remise (fraction decimale)
        freight : Frais de port
        lines : Lignes de la commande
    """

    number: Optional[int] = None
    client_code: str = ""
    placed_on: Optional[date] = None
    shipped_on: Optional[date] = None
    shipping_address: Optional[PostalAddress] = None
    recipient: Optional[str] = None
    discount: Decimal = Decimal("0")
    freight: Decimal = Decimal("0")
    lines: list[OrderLine] = field(default_factory=list)

    @property
    def is_shipped(self) -> bool:
        return self.shipped_on is not None

    @property
    def status(self) -> OrderStatus:
        return OrderStatus.SHIPPED if self.is_shipped else OrderStatus.OPEN

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.lines)

    def ensure_open(self) -> None:
        """Leve AlreadyShippedError si la commande est deja expediee."""
        if self.is_shipped:
            raise AlreadyShippedError(self.number)

    def mark_shipped(self, shipped_on: date) -> None:
        """Passe la commande a l'etat expedie (transition unique)."""
        self.ensure_open()
        self.shipped_on = shipped_on

    def quantities_by_product(self) -> dict[int, int]:
        """Somme des quantites par reference produit."""
        totals: dict[int, int] = {}
        for line in self.lines:
            totals[line.product_ref] = totals.get(line.product_ref, 0) + line.quantity
        return totals
