"""
Service des commandes : creation, consultation et expedition.

Regles metier :
- le client doit exister
- l'adresse de livraison est initialisee avec l'adresse du client
- un client ayant deja commande plus de 100 articles obtient 15% de remise
- une commande n'est expediee qu'une seule fois ; l'expedition decremente
  le stock de chaque produit commande

Chaque operation publique s'execute dans une seule unit of work : en cas
d'erreur, aucune ecriture partielle n'est conservee.
"""

from datetime import date
from decimal import Decimal

from loguru import logger

from src.core.entities import Order
from src.core.exceptions import NotFoundError
from src.core.ports.unit_of_work import IUnitOfWork

# Au-dela de ce nombre d'articles deja commandes, le client beneficie de la remise
DISCOUNT_THRESHOLD = 100
LOYALTY_DISCOUNT = Decimal("0.15")
# Precision de la colonne orders.discount
DISCOUNT_QUANTUM = Decimal("0.01")


class OrderService:
    """
    Service applicatif des commandes.

    Sans etat : les collaborateurs sont injectes au constructeur et chaque
    appel ouvre sa propre transaction.

    Example:
        service = OrderService(uow=SQLModelUnitOfWork(engine))
        order = service.create_order("ALFKI")
        service.ship_order(order.number)
    """

    def __init__(
        self,
        uow: IUnitOfWork,
        discount_threshold: int = DISCOUNT_THRESHOLD,
        loyalty_discount: Decimal = LOYALTY_DISCOUNT,
    ) -> None:
        """
        Initialise le service des commandes.

        Args:
            uow: Unit of work donnant acces aux repositories
            discount_threshold: Nombre d'articles a depasser pour obtenir la remise
            loyalty_discount: Remise accordee (fraction decimale)

        Raises:
            ValueError: Si la remise a plus de deux decimales
        """
        if loyalty_discount != loyalty_discount.quantize(DISCOUNT_QUANTUM):
            raise ValueError(f"loyalty_discount {loyalty_discount} has more than 2 decimal places")
        self._uow = uow
        self._discount_threshold = discount_threshold
        self._loyalty_discount = loyalty_discount

    def create_order(self, client_code: str) -> Order:
        """
        Enregistre une nouvelle commande pour un client connu par son code.

        Args:
            client_code: Code du client

        Returns:
            La commande creee, avec son numero et sa date de saisie

        Raises:
            NotFoundError: Si le client n'existe pas
        """
        with self._uow as uow:
            client = uow.clients.get_by_code(client_code)
            if client is None:
                raise NotFoundError("client", client_code)

            order = Order(
                client_code=client.code,
                placed_on=date.today(),
                shipping_address=client.address,
            )

            ordered = uow.clients.total_ordered_quantity(client.code)
            if ordered > self._discount_threshold:
                order.discount = self._loyalty_discount

            order = uow.orders.add(order)
            uow.commit()

        logger.info(
            f"Commande {order.number} creee pour {client_code} "
            f"(remise {order.discount}, {ordered} articles deja commandes)"
        )
        return order

    def get_order(self, order_number: int) -> Order:
        """
        Recupere une commande et ses lignes.

        Raises:
            NotFoundError: Si la commande n'existe pas
        """
        with self._uow as uow:
            order = uow.orders.get_by_number(order_number)
        if order is None:
            raise NotFoundError("order", order_number)
        return order

    def ship_order(self, order_number: int) -> Order:
        """
        Enregistre l'expedition d'une commande connue par son numero.

        La date d'expedition est la date du jour. Pour chaque produit commande,
        le stock est decremente de la quantite commandee, sans plancher : un
        stock negatif n'est pas corrige.

        Args:
            order_number: Numero de la commande

        Returns:
            La commande mise a jour

        Raises:
            NotFoundError: Si la commande n'existe pas
            AlreadyShippedError: Si la commande est deja expediee
        """
        with self._uow as uow:
            order = uow.orders.get_by_number(order_number)
            if order is None:
                raise NotFoundError("order", order_number)

            if order.is_shipped:
                logger.warning(f"Commande {order_number} deja expediee le {order.shipped_on}")
            order.mark_shipped(date.today())
            uow.orders.mark_shipped(order.number, order.shipped_on)

            for product_ref, quantity in order.quantities_by_product().items():
                uow.products.decrement_units_in_stock(product_ref, quantity)

            uow.commit()

        logger.info(
            f"Commande {order_number} expediee : {len(order.lines)} ligne(s), "
            f"{order.total_quantity} article(s)"
        )
        return order
