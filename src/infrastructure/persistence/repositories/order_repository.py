"""
Implementation SQLModel du repository Order.

Une commande est toujours chargee avec ses lignes. La suppression d'une
commande supprime explicitement ses lignes avant la commande elle-meme,
dans la meme transaction : aucune ligne orpheline ne peut subsister.
"""

from datetime import date
from typing import Optional

from sqlmodel import Session, select

from src.core.entities import Order
from src.core.exceptions import NotFoundError, ValidationError
from src.core.ports.repositories import IOrderRepository
from src.core.value_objects import PostalAddress
from src.infrastructure.persistence.models import OrderLineModel, OrderModel
from src.infrastructure.persistence.repositories.order_line_repository import (
    SQLModelOrderLineRepository,
)


class SQLModelOrderRepository(IOrderRepository):
    """
    Repository SQLModel pour les commandes.

    Implemente IOrderRepository avec conversion bidirectionnelle
    entre l'entite Order (domaine) et OrderModel (persistance).
    Le numero de commande est toujours attribue par la base.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _line_models(self, order_number: int) -> list[OrderLineModel]:
        statement = (
            select(OrderLineModel)
            .where(OrderLineModel.order_number == order_number)
            .order_by(OrderLineModel.id)
        )
        return list(self._session.exec(statement).all())

    def _to_entity(self, model: OrderModel) -> Order:
        """
        Convertit un modele DB en entite domaine, lignes comprises.

        Args :
            model : Le modele OrderModel depuis la DB

        Retourne :
            L'entite Order avec ses lignes
        """
        address = None
        if model.ship_street or model.ship_city:
            address = PostalAddress(
                street=model.ship_street or "",
                city=model.ship_city or "",
                region=model.ship_region,
                postal_code=model.ship_postal_code,
                country=model.ship_country,
            )
        lines = [
            SQLModelOrderLineRepository.to_entity(line)
            for line in self._line_models(model.number)
        ]
        return Order(
            number=model.number,
            client_code=model.client_code,
            placed_on=model.placed_on,
            shipped_on=model.shipped_on,
            shipping_address=address,
            recipient=model.recipient,
            discount=model.discount,
            freight=model.freight,
            lines=lines,
        )

    def _to_model(self, entity: Order) -> OrderModel:
        """
        Convertit une entite domaine en modele DB, sans numero ni lignes.

        Args :
            entity : L'entite Order du domaine

        Retourne :
            Le modele OrderModel pour l'insertion
        """
        address = entity.shipping_address
        return OrderModel(
            client_code=entity.client_code,
            placed_on=entity.placed_on or date.today(),
            shipped_on=entity.shipped_on,
            freight=entity.freight,
            discount=entity.discount,
            recipient=entity.recipient,
            ship_street=address.street if address else None,
            ship_city=address.city if address else None,
            ship_region=address.region if address else None,
            ship_postal_code=address.postal_code if address else None,
            ship_country=address.country if address else None,
        )

    def get_by_number(self, number: int) -> Optional[Order]:
        """Recupere une commande et ses lignes par son numero."""
        model = self._session.get(OrderModel, number)
        if model:
            return self._to_entity(model)
        return None

    def add(self, order: Order) -> Order:
        """Insere une nouvelle commande et retourne l'entite avec son numero."""
        if order.number is not None:
            raise ValidationError("number", "order numbers are assigned by the store")
        model = self._to_model(order)
        self._session.add(model)
        self._session.flush()
        return self._to_entity(model)

    def mark_shipped(self, number: int, shipped_on: date) -> None:
        """Enregistre la date d'expedition de la commande."""
        model = self._session.get(OrderModel, number)
        if model is None:
            raise NotFoundError("order", number)
        model.shipped_on = shipped_on
        self._session.add(model)
        self._session.flush()

    def delete(self, number: int) -> bool:
        """Supprime la commande et ses lignes. Retourne True si supprimee."""
        model = self._session.get(OrderModel, number)
        if model is None:
            return False
        for line in self._line_models(number):
            self._session.delete(line)
        # Les lignes doivent disparaitre avant la commande (cle etrangere)
        self._session.flush()
        self._session.delete(model)
        self._session.flush()
        return True

    def list_by_client(self, client_code: str) -> list[Order]:
        """Liste les commandes d'un client, par numero croissant."""
        statement = (
            select(OrderModel)
            .where(OrderModel.client_code == client_code)
            .order_by(OrderModel.number)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]
