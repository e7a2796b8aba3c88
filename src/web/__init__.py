"""Interface HTTP JSON (FastAPI) des operations sur les commandes."""
