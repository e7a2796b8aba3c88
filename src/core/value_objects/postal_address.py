"""
Objet valeur adresse postale.

L'adresse d'un client est copiee par valeur dans l'adresse de livraison
de chaque nouvelle commande.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PostalAddress:
    """
    Adresse postale immutable.

    Attributs :
        street : Numero et rue
        city : Ville
        region : Region ou etat (optionnel)
        postal_code : Code postal (optionnel)
        country : Pays (optionnel)
    """

    street: str
    city: str
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    @property
    def label(self) -> str:
        """Retourne l'adresse formatee sur une ligne."""
        locality = " ".join(part for part in (self.postal_code, self.city) if part)
        parts = [self.street, locality, self.region, self.country]
        return ", ".join(part for part in parts if part)
