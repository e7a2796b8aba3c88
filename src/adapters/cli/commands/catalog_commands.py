"""
Commande CLI d'import du catalogue (clients et produits) depuis un fichier JSON.
"""

from pathlib import Path
from typing import Annotated

import typer

from src.adapters.cli.helpers import console, exit_on_domain_error, with_container


def import_catalog(
    path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="Fichier JSON clients/produits"),
    ],
) -> None:
    """Importe les clients et produits d'un fichier JSON."""
    _import_catalog(path)


@exit_on_domain_error
@with_container()
def _import_catalog(container, path: Path) -> None:
    report = container.catalog_importer().import_file(path)
    console.print("[bold]Resume de l'import:[/bold]")
    console.print(f"  [green]{report.clients}[/green] client(s)")
    console.print(f"  [green]{report.products}[/green] produit(s)")
