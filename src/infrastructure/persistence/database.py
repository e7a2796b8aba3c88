"""
Configuration de la base de donnees pour Comptoirs.

Ce module fournit :
- Engine SQLAlchemy (SQLite par defaut, toute URL SQLAlchemy acceptee)
- Fonction d'initialisation des tables

La base de donnees est configuree via COMPTOIRS_DATABASE_URL (defaut: sqlite:///comptoirs.db).
"""

from pathlib import Path

from sqlalchemy import Engine, event
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Active les cles etrangeres (et ON DELETE CASCADE), desactivees par defaut sous SQLite."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Cree l'engine pour l'URL donnee.

    Pour SQLite, cree le repertoire parent du fichier si necessaire et active
    les cles etrangeres sur chaque connexion. Une base en memoire est partagee
    par toutes les sessions (StaticPool).

    Args:
        database_url: URL SQLAlchemy de la base
        echo: Trace les requetes SQL emises

    Returns:
        L'engine configure
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    if database_url in _MEMORY_URLS:
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_db(engine: Engine) -> Engine:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes.

    Returns:
        L'engine, pour usage comme Resource du container DI
    """
    # L'import est fait ici pour eviter les imports circulaires
    from src.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    return engine
