"""
Exceptions metier de Comptoirs.

Levees par la couche services quand une regle metier est violee.
Aucune n'est relancee en interne : elles remontent a l'appelant (CLI, API web)
qui les traduit en reponse visible par l'utilisateur.

Hierarchie :
- ComptoirsError
  - NotFoundError : entite referencee absente (client, produit, commande)
  - ValidationError : entree mal formee (quantite non positive...)
  - BusinessRuleError : violation d'etat ou d'invariant
    - AlreadyShippedError : commande deja expediee
"""

from typing import Any


class ComptoirsError(Exception):
    """Classe de base des erreurs metier."""

    kind = "error"


class NotFoundError(ComptoirsError):
    """
    Exception levee quand une entite referencee n'existe pas.

    Attributes:
        entity: Type d'entite recherchee ("client", "product", "order")
        key: Cle de l'entite introuvable
    """

    kind = "not_found"

    def __init__(self, entity: str, key: Any) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key!r} not found")


class ValidationError(ComptoirsError):
    """
    Exception levee pour une entree mal formee.

    Attributes:
        field: Nom du champ invalide
    """

    kind = "validation"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class BusinessRuleError(ComptoirsError):
    """Violation d'une regle metier (produit indisponible, stock insuffisant...)."""

    kind = "business_rule"


class AlreadyShippedError(BusinessRuleError):
    """Exception levee quand une commande est deja expediee."""

    def __init__(self, order_number: int) -> None:
        self.order_number = order_number
        super().__init__("order already shipped")
