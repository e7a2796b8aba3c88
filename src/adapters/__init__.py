"""
Couche adaptateurs (interfaces).

Les adaptateurs exposent les services applicatifs aux systemes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)

L'interface HTTP (FastAPI) est dans src/web/.

Chaque adaptateur dépend de core/ et services/, mais core/ ne dépend jamais
des adaptateurs.
"""
