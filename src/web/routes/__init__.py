"""Routeurs FastAPI."""
