"""
Dépendances partagées de l'application web.

Les services sont obtenus depuis le Container DI attaché à l'application
au démarrage (voir app.lifespan).
"""

from fastapi import Request

from ..services.line_service import LineService
from ..services.order_service import OrderService


def get_order_service(request: Request) -> OrderService:
    """Service des commandes depuis le container de l'application."""
    return request.app.state.container.order_service()


def get_line_service(request: Request) -> LineService:
    """Service des lignes depuis le container de l'application."""
    return request.app.state.container.line_service()
