"""
TechnologyService - Service applicatif pour la gestion des technologies
"""

import uuid
import logging
from typing import List, Optional
from domain.entities.technology import Technology
from domain.exceptions import DuplicateResourceError
from domain.repositories.technology_repository import TechnologyRepository

logger = logging.getLogger(__name__)


class TechnologyService:
    """Service pour la gestion des technologies"""

    def __init__(self, technology_repository: TechnologyRepository):
        self.technology_repository = technology_repository

    def list_technologies(self) -> List[Technology]:
        """Toutes les technologies, par nom croissant"""
        technologies = self.technology_repository.find_all()
        logger.info(f"Listed {len(technologies)} technologies")
        return technologies

    def create_technology(self, name: str, description: Optional[str] = None) -> Technology:
        """Crée une technologie ; le nom doit être unique"""
        with self.technology_repository.transaction():
            # La contrainte UNIQUE reste l'arbitre en cas de création concurrente
            if self.technology_repository.find_by_name(name):
                raise DuplicateResourceError(f"Technology with name '{name}' already exists")

            technology = self.technology_repository.add(Technology(
                id=str(uuid.uuid4()),
                name=name,
                description=description
            ))

        logger.info(f"Created technology: {technology.id} ({technology.name})")
        return technology
