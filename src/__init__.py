"""
Comptoirs - Gestion des commandes clients d'un comptoir de distribution.

Ce package enregistre les commandes des clients connus, les lignes de commande
sur le catalogue produits et l'expedition des commandes, en garantissant la
coherence des stocks entre commandes, lignes et produits.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, exceptions)
- services/ : Couche application (cas d'utilisation, transactions)
- infrastructure/ : Persistance SQLModel (modeles, repositories, unit of work)
- adapters/ et web/ : Interfaces CLI et HTTP
"""

__version__ = "0.1.0"
