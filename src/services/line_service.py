"""
Service des lignes de commande.

Enregistre une nouvelle ligne pour une commande ouverte et incremente la
quantite engagee du produit (units_on_order). Le stock (units_in_stock)
n'est pas touche : il n'est decremente qu'a l'expedition.
"""

from loguru import logger

from src.core.entities import OrderLine
from src.core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from src.core.ports.unit_of_work import IUnitOfWork


class LineService:
    """
    Service applicatif des lignes de commande.

    Les regles sont verifiees dans cet ordre, la premiere violee l'emporte :
    1. la quantite est un entier strictement positif
    2. le produit existe
    3. le produit n'est pas marque indisponible
    4. le stock courant du produit couvre la quantite
    5. la commande existe
    6. la commande n'est pas deja expediee

    Le controle de stock est ponctuel : il ignore les quantites deja
    engagees sur d'autres commandes ouvertes.
    """

    def __init__(self, uow: IUnitOfWork) -> None:
        """
        Args:
            uow: Unit of work donnant acces aux repositories
        """
        self._uow = uow

    def add_line(self, order_number: int, product_ref: int, quantity: int) -> OrderLine:
        """
        Ajoute une ligne a une commande ouverte.

        Args:
            order_number: Numero de la commande
            product_ref: Reference du produit
            quantity: Quantite commandee (strictement positive)

        Returns:
            La ligne creee, avec son identifiant

        Raises:
            ValidationError: Si la quantite n'est pas un entier positif
            NotFoundError: Si le produit ou la commande n'existe pas
            BusinessRuleError: Produit indisponible, stock insuffisant
                ou commande deja expediee
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("quantity", "must be a positive integer")

        with self._uow as uow:
            product = uow.products.get_by_reference(product_ref)
            if product is None:
                raise NotFoundError("product", product_ref)
            if not product.is_available:
                logger.warning(f"Produit {product_ref} indisponible")
                raise BusinessRuleError("product unavailable")
            if not product.has_stock_for(quantity):
                logger.warning(
                    f"Stock insuffisant pour {product_ref} : "
                    f"{product.units_in_stock} < {quantity}"
                )
                raise BusinessRuleError("insufficient stock")

            order = uow.orders.get_by_number(order_number)
            if order is None:
                raise NotFoundError("order", order_number)
            order.ensure_open()

            line = uow.lines.add(
                OrderLine(order_number=order.number, product_ref=product_ref, quantity=quantity)
            )
            uow.products.increment_units_on_order(product_ref, quantity)
            uow.commit()

        logger.info(f"Ligne {line.id} ajoutee a la commande {order_number} : {quantity} x {product_ref}")
        return line
