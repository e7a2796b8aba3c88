"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).

Les repositories ne valident jamais la transaction : c'est le role de
l'unit of work qui les porte.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from src.core.entities import Client, Order, OrderLine, Product


class IClientRepository(ABC):
    """
    Interface de l'annuaire clients.

    Définit la recherche par code et l'agregat des quantites deja commandees.
    """

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Client]:
        """Récupère un client par son code."""
        ...

    @abstractmethod
    def save(self, client: Client) -> Client:
        """Sauvegarde un client (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def total_ordered_quantity(self, code: str) -> int:
        """Somme des quantites de toutes les lignes de toutes les commandes du client."""
        ...


class IProductRepository(ABC):
    """
    Interface du catalogue produits.

    Les compteurs de stock sont relus puis reecrits dans la transaction de
    l'unit of work ; la base serialise les transactions concurrentes.
    """

    @abstractmethod
    def get_by_reference(self, reference: int) -> Optional[Product]:
        """Récupère un produit par sa référence."""
        ...

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Sauvegarde un produit (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def increment_units_on_order(self, reference: int, quantity: int) -> None:
        """Ajoute quantity aux unites engagees du produit."""
        ...

    @abstractmethod
    def decrement_units_in_stock(self, reference: int, quantity: int) -> None:
        """Retire quantity du stock du produit, sans plancher."""
        ...


class IOrderRepository(ABC):
    """
    Interface de stockage des commandes.

    Une commande est toujours chargee avec ses lignes. La suppression
    d'une commande supprime ses lignes dans la meme transaction.
    """

    @abstractmethod
    def get_by_number(self, number: int) -> Optional[Order]:
        """Récupère une commande et ses lignes par son numéro."""
        ...

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Insere une nouvelle commande et retourne l'entite avec son numero."""
        ...

    @abstractmethod
    def mark_shipped(self, number: int, shipped_on: date) -> None:
        """Enregistre la date d'expedition de la commande."""
        ...

    @abstractmethod
    def delete(self, number: int) -> bool:
        """Supprime la commande et ses lignes. Retourne True si supprimée."""
        ...

    @abstractmethod
    def list_by_client(self, client_code: str) -> list[Order]:
        """Liste les commandes d'un client."""
        ...


class IOrderLineRepository(ABC):
    """Interface de stockage des lignes de commande."""

    @abstractmethod
    def add(self, line: OrderLine) -> OrderLine:
        """Insere une nouvelle ligne et retourne l'entite avec son identifiant."""
        ...

    @abstractmethod
    def list_by_order(self, order_number: int) -> list[OrderLine]:
        """Liste les lignes d'une commande."""
        ...
