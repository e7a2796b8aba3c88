"""
Routes des commandes.

Expose la creation d'une commande pour un client, l'ajout d'une ligne,
l'expedition et la consultation. Les erreurs metier sont traduites en
reponses HTTP par les handlers enregistres dans app.py.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from ...services.line_service import LineService
from ...services.order_service import OrderService
from ..deps import get_line_service, get_order_service
from ..schemas import ErrorOut, OrderLineOut, OrderOut

router = APIRouter(prefix="/orders", tags=["orders"])

_ERRORS = {
    404: {"model": ErrorOut},
    409: {"model": ErrorOut},
    422: {"model": ErrorOut},
}


@router.post("/for/{client_code}", response_model=OrderOut, responses=_ERRORS)
def create_order(
    client_code: str,
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Enregistre une nouvelle commande pour le client."""
    return OrderOut.model_validate(service.create_order(client_code))


@router.post("/lines", response_model=OrderLineOut, responses=_ERRORS)
def add_line(
    service: Annotated[LineService, Depends(get_line_service)],
    order_number: int = Query(...),
    product_ref: int = Query(...),
    quantity: int = Query(...),
):
    """Ajoute une ligne a une commande ouverte."""
    line = service.add_line(order_number, product_ref, quantity)
    return OrderLineOut.model_validate(line)


@router.post("/{order_number}/ship", response_model=OrderOut, responses=_ERRORS)
def ship_order(
    order_number: int,
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Enregistre l'expedition de la commande."""
    return OrderOut.model_validate(service.ship_order(order_number))


@router.get("/{order_number}", response_model=OrderOut, responses=_ERRORS)
def get_order(
    order_number: int,
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Consulte une commande et ses lignes."""
    return OrderOut.model_validate(service.get_order(order_number))
