"""
Interface ProjectRepository - Définit les opérations d'accès aux données pour Project
"""

from abc import ABC, abstractmethod
from typing import ContextManager, List, Optional, Tuple
from domain.entities.pagination import ListQueryParams
from domain.entities.project import Project, ProjectWithRelations


class ProjectRepository(ABC):
    """Interface pour le repository des projets"""

    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        """Portée transactionnelle : commit en sortie, rollback sur erreur"""
        pass

    @abstractmethod
    def find_by_id(self, project_id: str) -> Optional[Project]:
        """Trouve un projet par son ID"""
        pass

    @abstractmethod
    def find_with_relations(self, project_id: str) -> Optional[ProjectWithRelations]:
        """Trouve un projet avec ses technologies et utilisateurs"""
        pass

    @abstractmethod
    def find_page(self, params: ListQueryParams) -> Tuple[List[Project], int]:
        """Retourne la page demandée et le nombre total d'éléments filtrés"""
        pass

    @abstractmethod
    def add(self, project: Project) -> Project:
        """Insère un projet"""
        pass

    @abstractmethod
    def update(self, project: Project) -> Project:
        """Met à jour les champs scalaires d'un projet"""
        pass

    @abstractmethod
    def delete(self, project_id: str) -> bool:
        """Supprime un projet ; False si aucune ligne n'a été supprimée"""
        pass

    @abstractmethod
    def replace_technologies(self, project_id: str, technology_ids: List[str]) -> None:
        """Remplace toutes les associations projet-technologie"""
        pass

    @abstractmethod
    def replace_users(self, project_id: str, user_ids: List[str]) -> None:
        """Remplace toutes les associations projet-utilisateur"""
        pass
