"""
Configuration de la session de base de données SQLAlchemy
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from config import Config

config = Config()


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def _is_sqlite_memory(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url


def create_db_engine(database_url: str, pool_size: int = 5, max_overflow: int = 0, pool_timeout: int = 3) -> Engine:
    """
    Crée le moteur de base de données avec un pool borné.

    Une connexion demandée au-delà de `pool_timeout` secondes lève une
    erreur au lieu de bloquer indéfiniment.
    """
    if _is_sqlite_memory(database_url):
        # Une seule connexion partagée, sinon chaque connexion voit une base vide
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
    else:
        connect_args = {"check_same_thread": False} if _is_sqlite(database_url) else {}
        engine = create_engine(
            database_url,
            connect_args=connect_args,
            pool_pre_ping=True,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout
        )

    if _is_sqlite(database_url):
        @event.listens_for(engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


# Créer le moteur de base de données
engine = create_db_engine(
    config.database_url,
    pool_size=config.db_pool_size,
    max_overflow=config.db_max_overflow,
    pool_timeout=config.db_pool_timeout
)

# Créer la session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
