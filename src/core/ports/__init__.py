"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IClientRepository : Annuaire clients
- IProductRepository : Catalogue produits et compteurs de stock
- IOrderRepository : Stockage des commandes
- IOrderLineRepository : Stockage des lignes de commande

Port transactionnel :
- IUnitOfWork : Transaction partagee par les repositories d'une operation
"""

from src.core.ports.repositories import (
    IClientRepository,
    IProductRepository,
    IOrderRepository,
    IOrderLineRepository,
)
from src.core.ports.unit_of_work import IUnitOfWork

__all__ = [
    # Repositories
    "IClientRepository",
    "IProductRepository",
    "IOrderRepository",
    "IOrderLineRepository",
    # Transaction
    "IUnitOfWork",
]
