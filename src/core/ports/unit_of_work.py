"""
Port unit of work.

Une unit of work delimite une transaction : les repositories qu'elle expose
partagent la meme session, et rien n'est ecrit sans appel explicite a commit().
Une exception levee dans le bloc `with` annule toutes les ecritures.

Usage:
    with uow:
        product = uow.products.get_by_reference(50)
        uow.products.increment_units_on_order(50, 5)
        uow.commit()
"""

from abc import ABC, abstractmethod

from src.core.ports.repositories import (
    IClientRepository,
    IOrderLineRepository,
    IOrderRepository,
    IProductRepository,
)


class IUnitOfWork(ABC):
    """Contrat transactionnel partage par les services."""

    clients: IClientRepository
    products: IProductRepository
    orders: IOrderRepository
    lines: IOrderLineRepository

    def __enter__(self) -> "IUnitOfWork":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        # Toute ecriture non validee est annulee
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Valide la transaction courante."""
        ...

    @abstractmethod
    def rollback(self) -> None:
        """Annule la transaction courante."""
        ...
