"""
Initialisation de la base de données
"""

import logging
from typing import Optional
from sqlalchemy.engine import Engine
from infrastructure.database.session import engine as default_engine, SessionLocal
from infrastructure.database.models import Base
from infrastructure.database.seed import is_empty, seed_demo_data
from config import Config

config = Config()
logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None, seed: Optional[bool] = None):
    """Initialise la base de données (crée les tables et, si demandé, les données de démo)"""
    engine = engine or default_engine
    seed = config.seed_data if seed is None else seed

    # Créer les tables
    Base.metadata.create_all(bind=engine)
    logger.info("✅ Tables de base de données créées")

    if not seed:
        return

    db = SessionLocal(bind=engine)
    try:
        if is_empty(db):
            seed_demo_data(db)
        else:
            logger.info("Base non vide, données de démonstration ignorées")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
