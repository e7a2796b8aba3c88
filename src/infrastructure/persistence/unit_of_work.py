"""
Unit of work SQLModel.

Ouvre une session par bloc `with` et y attache les quatre repositories :
toutes les lectures et ecritures d'une operation metier partagent ainsi la
meme transaction. Sans appel a commit(), la sortie du bloc annule tout.
"""

from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import Session

from src.core.ports.unit_of_work import IUnitOfWork
from src.infrastructure.persistence.repositories import (
    SQLModelClientRepository,
    SQLModelOrderLineRepository,
    SQLModelOrderRepository,
    SQLModelProductRepository,
)


class SQLModelUnitOfWork(IUnitOfWork):
    """
    Implementation de IUnitOfWork sur une Session SQLModel.

    L'instance est reutilisable : chaque entree dans le bloc `with` ouvre
    une nouvelle session, fermee a la sortie.

    Example:
        uow = SQLModelUnitOfWork(engine)
        with uow:
            order = uow.orders.get_by_number(100)
            uow.orders.mark_shipped(100, date.today())
            uow.commit()
    """

    def __init__(self, engine: Engine) -> None:
        """
        Args:
            engine: Engine SQLAlchemy de la base
        """
        self._engine = engine
        self._session: Optional[Session] = None

    def __enter__(self) -> "SQLModelUnitOfWork":
        if self._session is not None:
            raise RuntimeError("Unit of work deja ouverte")
        self._session = Session(self._engine)
        self.clients = SQLModelClientRepository(self._session)
        self.products = SQLModelProductRepository(self._session)
        self.orders = SQLModelOrderRepository(self._session)
        self.lines = SQLModelOrderLineRepository(self._session)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        try:
            if exc_type is not None:
                logger.debug(f"Transaction annulee : {exc_type.__name__}")
            super().__exit__(exc_type, exc_value, traceback)
        finally:
            self._session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work non ouverte")
        return self._session

    def commit(self) -> None:
        """Valide la transaction courante."""
        self.session.commit()

    def rollback(self) -> None:
        """Annule la transaction courante."""
        self.session.rollback()
