"""
Implementation SQLModel du repository Client.

Implemente l'interface IClientRepository pour l'annuaire clients,
y compris l'agregat des quantites deja commandees par un client.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from src.core.entities import Client
from src.core.ports.repositories import IClientRepository
from src.core.value_objects import PostalAddress
from src.infrastructure.persistence.models import (
    ClientModel,
    OrderLineModel,
    OrderModel,
)


class SQLModelClientRepository(IClientRepository):
    """
    Repository SQLModel pour les clients.

    Implemente IClientRepository avec conversion bidirectionnelle
    entre l'entite Client (domaine) et ClientModel (persistance).
    Ne valide jamais la transaction : voir SQLModelUnitOfWork.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: ClientModel) -> Client:
        """Convertit un modele DB en entite domaine."""
        address = None
        if model.address_street or model.address_city:
            address = PostalAddress(
                street=model.address_street or "",
                city=model.address_city or "",
                region=model.address_region,
                postal_code=model.address_postal_code,
                country=model.address_country,
            )
        return Client(
            code=model.code,
            name=model.name,
            contact=model.contact,
            phone=model.phone,
            address=address,
        )

    def _apply(self, entity: Client, model: ClientModel) -> None:
        """Recopie les champs de l'entite dans le modele."""
        address = entity.address
        model.name = entity.name
        model.contact = entity.contact
        model.phone = entity.phone
        model.address_street = address.street if address else None
        model.address_city = address.city if address else None
        model.address_region = address.region if address else None
        model.address_postal_code = address.postal_code if address else None
        model.address_country = address.country if address else None

    def get_by_code(self, code: str) -> Optional[Client]:
        """Recupere un client par son code."""
        model = self._session.get(ClientModel, code)
        if model:
            return self._to_entity(model)
        return None

    def save(self, client: Client) -> Client:
        """Sauvegarde un client (insertion ou mise a jour)."""
        model = self._session.get(ClientModel, client.code)
        if model is None:
            model = ClientModel(code=client.code, name=client.name)
        self._apply(client, model)
        self._session.add(model)
        self._session.flush()
        return self._to_entity(model)

    def total_ordered_quantity(self, code: str) -> int:
        """Somme des quantites de toutes les lignes de toutes les commandes du client."""
        statement = (
            select(func.coalesce(func.sum(OrderLineModel.quantity), 0))
            .select_from(OrderLineModel)
            .join(OrderModel, OrderModel.number == OrderLineModel.order_number)
            .where(OrderModel.client_code == code)
        )
        return int(self._session.exec(statement).one())
