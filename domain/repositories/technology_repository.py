"""
Interface TechnologyRepository - Définit les opérations d'accès aux données pour Technology
"""

from abc import ABC, abstractmethod
from typing import ContextManager, List, Optional
from domain.entities.technology import Technology


class TechnologyRepository(ABC):
    """Interface pour le repository des technologies"""

    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        """Portée transactionnelle : commit en sortie, rollback sur erreur"""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Technology]:
        """Trouve une technologie par son nom"""
        pass

    @abstractmethod
    def exists(self, technology_id: str) -> bool:
        """Vérifie qu'une technologie existe"""
        pass

    @abstractmethod
    def find_all(self) -> List[Technology]:
        """Retourne toutes les technologies triées par nom"""
        pass

    @abstractmethod
    def add(self, technology: Technology) -> Technology:
        """Insère une technologie (DuplicateResourceError si le nom existe)"""
        pass
