"""
Import du catalogue produits et de l'annuaire clients.

Charge un document JSON de la forme :

    {
        "clients": [{"code": "ALFKI", "name": "...", "address": {...}}],
        "products": [{"reference": 50, "name": "...", "units_in_stock": 10}]
    }

Les entrees sont inserees ou mises a jour par cle, dans une seule
transaction : une entree invalide annule tout l'import.
"""

import json
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

import pydantic
from loguru import logger

from src.core.entities import Client, Product
from src.core.exceptions import ValidationError
from src.core.ports.unit_of_work import IUnitOfWork
from src.core.value_objects import PostalAddress


class AddressEntry(pydantic.BaseModel):
    street: str
    city: str
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class ClientEntry(pydantic.BaseModel):
    code: str = pydantic.Field(min_length=1, max_length=5)
    name: str
    contact: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[AddressEntry] = None


class ProductEntry(pydantic.BaseModel):
    reference: int
    name: str
    unit_price: Decimal = Decimal("0")
    units_in_stock: int = pydantic.Field(default=0, ge=0)
    units_on_order: int = pydantic.Field(default=0, ge=0)
    reorder_level: int = pydantic.Field(default=0, ge=0)
    unavailable: bool = False


class CatalogDocument(pydantic.BaseModel):
    clients: list[ClientEntry] = []
    products: list[ProductEntry] = []


@dataclass
class ImportReport:
    """Nombre d'entrees importees par type."""

    clients: int = 0
    products: int = 0


class CatalogImporter:
    """
    Importe clients et produits depuis un document JSON.

    Example:
        importer = CatalogImporter(uow=SQLModelUnitOfWork(engine))
        report = importer.import_file(Path("catalog.json"))
    """

    def __init__(self, uow: IUnitOfWork) -> None:
        self._uow = uow

    def import_file(self, path: Path) -> ImportReport:
        """Lit et importe un fichier JSON."""
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValidationError("document", f"invalid JSON in {path}: {e}") from e
        return self.import_document(data)

    def import_document(self, data: dict[str, Any]) -> ImportReport:
        """
        Importe un document deja decode.

        Raises:
            ValidationError: Si le document ne respecte pas le schema attendu
        """
        try:
            document = CatalogDocument.model_validate(data)
        except pydantic.ValidationError as e:
            raise ValidationError("document", str(e)) from e

        report = ImportReport()
        with self._uow as uow:
            for entry in document.clients:
                uow.clients.save(self._to_client(entry))
                report.clients += 1
            for entry in document.products:
                uow.products.save(Product(**entry.model_dump()))
                report.products += 1
            uow.commit()

        logger.info(f"Catalogue importe : {report.clients} client(s), {report.products} produit(s)")
        return report

    @staticmethod
    def _to_client(entry: ClientEntry) -> Client:
        address = None
        if entry.address:
            address = PostalAddress(**entry.address.model_dump())
        return Client(
            code=entry.code,
            name=entry.name,
            contact=entry.contact,
            phone=entry.phone,
            address=address,
        )
