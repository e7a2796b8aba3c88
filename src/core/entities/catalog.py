"""
Entités du catalogue et de l'annuaire clients.

Le client et le produit sont les feuilles du modele : les commandes les
referencent, les services lisent et mettent a jour leurs compteurs.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from src.core.value_objects import PostalAddress


@dataclass
class Client:
    """
    Client identifie par un code.

    La quantite totale d'articles deja commandes n'est pas stockee ici :
    elle est calculee a la demande par le repository clients.

    Attributs :
        code : Code client (cle)
        name : Raison sociale
        contact : Nom du contact (optionnel)
        phone : Telephone (optionnel)
        address : Adresse postale (optionnelle)
    """

    code: str
    name: str = ""
    contact: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[PostalAddress] = None


@dataclass
class Product:
    """
    Produit du catalogue avec ses compteurs de stock.

    Attributs :
        reference : Reference produit (cle)
        name : Libelle
        unit_price : Prix unitaire
        units_in_stock : Unites en stock, decrementees a l'expedition
        units_on_order : Unites engagees sur des lignes de commande
        reorder_level : Seuil de reapprovisionnement
        unavailable : Produit retire de la vente
    """

    reference: int
    name: str = ""
    unit_price: Decimal = Decimal("0")
    units_in_stock: int = 0
    units_on_order: int = 0
    reorder_level: int = 0
    unavailable: bool = False

    @property
    def is_available(self) -> bool:
        return not self.unavailable

    def has_stock_for(self, quantity: int) -> bool:
        """Verifie le stock courant, sans tenir compte des unites engagees."""
        return self.units_in_stock >= quantity
