"""
Implementation SQLModel du repository OrderLine.

Les lignes ne sont jamais modifiees apres insertion : le repository
ne propose que l'ajout et la lecture.
"""

from sqlmodel import Session, select

from src.core.entities import OrderLine
from src.core.ports.repositories import IOrderLineRepository
from src.infrastructure.persistence.models import OrderLineModel


class SQLModelOrderLineRepository(IOrderLineRepository):
    """Repository SQLModel pour les lignes de commande."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def to_entity(model: OrderLineModel) -> OrderLine:
        """Convertit un modele DB en entite domaine."""
        return OrderLine(
            id=model.id,
            order_number=model.order_number,
            product_ref=model.product_ref,
            quantity=model.quantity,
        )

    def add(self, line: OrderLine) -> OrderLine:
        """Insere la ligne ; l'identifiant est attribue par la base au flush."""
        model = OrderLineModel(
            order_number=line.order_number,
            product_ref=line.product_ref,
            quantity=line.quantity,
        )
        self._session.add(model)
        self._session.flush()
        return self.to_entity(model)

    def list_by_order(self, order_number: int) -> list[OrderLine]:
        """Liste les lignes d'une commande, dans l'ordre d'insertion."""
        statement = (
            select(OrderLineModel)
            .where(OrderLineModel.order_number == order_number)
            .order_by(OrderLineModel.id)
        )
        models = self._session.exec(statement).all()
        return [self.to_entity(model) for model in models]
