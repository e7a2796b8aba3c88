"""
Schemas de reponse de l'API web.

Les entites du domaine (dataclasses) sont converties par attributs ;
les montants decimaux sont serialises en chaine pour ne rien perdre en precision.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..core.entities import OrderStatus


class AddressOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    street: str
    city: str
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class OrderLineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_number: int
    product_ref: int
    quantity: int


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    number: int
    client_code: str
    placed_on: date
    shipped_on: Optional[date] = None
    status: OrderStatus
    shipping_address: Optional[AddressOut] = None
    recipient: Optional[str] = None
    discount: Decimal
    freight: Decimal
    lines: list[OrderLineOut] = []


class ErrorOut(BaseModel):
    """Corps des reponses d'erreur metier."""

    error: str
    detail: str
