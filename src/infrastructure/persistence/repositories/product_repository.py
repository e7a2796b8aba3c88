"""
Implementation SQLModel du repository Product.

Les compteurs de stock sont mis a jour par lecture-modification-ecriture
dans la session courante ; l'ecriture est emise au flush, dans la
transaction de l'unit of work.
"""

from typing import Optional

from sqlmodel import Session

from src.core.entities import Product
from src.core.exceptions import NotFoundError
from src.core.ports.repositories import IProductRepository
from src.infrastructure.persistence.models import ProductModel


class SQLModelProductRepository(IProductRepository):
    """
    Repository SQLModel pour le catalogue produits.

    Implemente IProductRepository avec conversion bidirectionnelle
    entre l'entite Product (domaine) et ProductModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: ProductModel) -> Product:
        """Convertit un modele DB en entite domaine."""
        return Product(
            reference=model.reference,
            name=model.name,
            unit_price=model.unit_price,
            units_in_stock=model.units_in_stock,
            units_on_order=model.units_on_order,
            reorder_level=model.reorder_level,
            unavailable=model.unavailable,
        )

    def _get_model(self, reference: int) -> ProductModel:
        model = self._session.get(ProductModel, reference)
        if model is None:
            raise NotFoundError("product", reference)
        return model

    def get_by_reference(self, reference: int) -> Optional[Product]:
        """Recupere un produit par sa reference."""
        model = self._session.get(ProductModel, reference)
        if model:
            return self._to_entity(model)
        return None

    def save(self, product: Product) -> Product:
        """Sauvegarde un produit (insertion ou mise a jour)."""
        model = self._session.get(ProductModel, product.reference)
        if model is None:
            model = ProductModel(reference=product.reference, name=product.name)
        model.name = product.name
        model.unit_price = product.unit_price
        model.units_in_stock = product.units_in_stock
        model.units_on_order = product.units_on_order
        model.reorder_level = product.reorder_level
        model.unavailable = product.unavailable
        self._session.add(model)
        self._session.flush()
        return self._to_entity(model)

    def increment_units_on_order(self, reference: int, quantity: int) -> None:
        """Ajoute quantity aux unites engagees du produit."""
        model = self._get_model(reference)
        model.units_on_order += quantity
        self._session.add(model)
        self._session.flush()

    def decrement_units_in_stock(self, reference: int, quantity: int) -> None:
        """Retire quantity du stock du produit, sans plancher."""
        model = self._get_model(reference)
        model.units_in_stock -= quantity
        self._session.add(model)
        self._session.flush()
