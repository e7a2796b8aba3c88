"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py, utilisant SQLModel pour
la persistance.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit la session SQLModel de l'unit of work
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
- Ne valide jamais la transaction (flush uniquement)
"""

from src.infrastructure.persistence.repositories.client_repository import (
    SQLModelClientRepository,
)
from src.infrastructure.persistence.repositories.product_repository import (
    SQLModelProductRepository,
)
from src.infrastructure.persistence.repositories.order_repository import (
    SQLModelOrderRepository,
)
from src.infrastructure.persistence.repositories.order_line_repository import (
    SQLModelOrderLineRepository,
)

__all__ = [
    "SQLModelClientRepository",
    "SQLModelProductRepository",
    "SQLModelOrderRepository",
    "SQLModelOrderLineRepository",
]
