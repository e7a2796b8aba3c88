"""Interface ligne de commande de Comptoirs (Typer + Rich)."""
