"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- PostalAddress : Adresse postale d'un client ou de livraison d'une commande
"""

from src.core.value_objects.postal_address import PostalAddress

__all__ = [
    "PostalAddress",
]
