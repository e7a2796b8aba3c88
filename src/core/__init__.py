"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur et
exceptions métier. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Client, Product, Order, OrderLine)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (PostalAddress)
"""
