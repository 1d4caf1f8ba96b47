"""
ProjectService - Service applicatif pour la gestion des projets
"""

import uuid
import logging
from typing import Any, Dict, Iterable, List, Optional
from domain.entities.pagination import ListQueryParams, Page, PaginationMetadata
from domain.entities.project import Project, ProjectWithRelations
from domain.exceptions import (
    InternalError, ProjectNotFoundError, TechnologyNotFoundError, UserNotFoundError, ValidationError
)
from domain.repositories.project_repository import ProjectRepository
from domain.repositories.technology_repository import TechnologyRepository
from domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def unique_ids(ids: Iterable[Any]) -> List[str]:
    """Identifiants sous forme texte, doublons retirés (première occurrence conservée)"""
    return list(dict.fromkeys(str(value) for value in ids))


class ProjectService:
    """Service pour la gestion des projets et de leurs associations"""

    def __init__(
        self,
        project_repository: ProjectRepository,
        technology_repository: TechnologyRepository,
        user_repository: UserRepository
    ):
        self.project_repository = project_repository
        self.technology_repository = technology_repository
        self.user_repository = user_repository

    def list_projects(self, params: ListQueryParams) -> Page[Project]:
        """Liste filtrée, triée et paginée"""
        projects, total_items = self.project_repository.find_page(params)
        page = params.effective_page()
        page_size = params.effective_page_size()
        logger.info(f"Listed {len(projects)} projects (page {page}, total {total_items})")
        return Page(
            data=projects,
            pagination=PaginationMetadata.build(page, page_size, total_items)
        )

    def get_project(self, project_id: str) -> ProjectWithRelations:
        """Récupère un projet avec ses technologies et utilisateurs"""
        project = self.project_repository.find_with_relations(str(project_id))
        if project is None:
            raise ProjectNotFoundError(project_id)
        logger.info(
            f"Retrieved project: {project.project.id} with {len(project.technologies)} "
            f"technologies and {len(project.users)} users"
        )
        return project

    def _ensure_technologies_exist(self, technology_ids: List[str]) -> None:
        for technology_id in technology_ids:
            if not self.technology_repository.exists(technology_id):
                raise TechnologyNotFoundError(technology_id)

    def _ensure_users_exist(self, user_ids: List[str]) -> None:
        for user_id in user_ids:
            if not self.user_repository.exists(user_id):
                raise UserNotFoundError(user_id)

    def _reload(self, project_id: str) -> ProjectWithRelations:
        project = self.project_repository.find_with_relations(project_id)
        if project is None:
            raise InternalError(f"Project {project_id} vanished after write")
        return project

    def create_project(
        self,
        name: str,
        description: str,
        repository_url: str,
        language: str,
        rating: Optional[float] = None,
        technology_ids: Optional[Iterable[Any]] = None,
        user_ids: Optional[Iterable[Any]] = None
    ) -> ProjectWithRelations:
        """
        Crée un projet et ses associations dans une seule transaction.

        Le premier utilisateur listé devient propriétaire, les suivants
        contributeurs.
        """
        technology_ids = unique_ids(technology_ids or [])
        user_ids = unique_ids(user_ids or [])

        try:
            project = Project(
                id=str(uuid.uuid4()),
                name=name,
                description=description,
                repository_url=repository_url,
                language=language,
                rating=rating
            )
        except ValueError as e:
            raise ValidationError(str(e))

        with self.project_repository.transaction():
            self._ensure_technologies_exist(technology_ids)
            self._ensure_users_exist(user_ids)
            self.project_repository.add(project)
            if technology_ids:
                self.project_repository.replace_technologies(project.id, technology_ids)
            if user_ids:
                self.project_repository.replace_users(project.id, user_ids)

        logger.info(f"Created project: {project.id} ({project.name})")
        return self._reload(project.id)

    def update_project(self, project_id: str, changes: Dict[str, Any]) -> ProjectWithRelations:
        """
        Mise à jour partielle.

        `changes` ne contient que les champs envoyés par le client. Une liste
        d'associations présente (même vide) remplace les associations
        existantes ; absente ou nulle, elle les laisse intactes.
        """
        project_id = str(project_id)
        technology_ids = changes.get("technology_ids")
        user_ids = changes.get("user_ids")
        technology_ids = unique_ids(technology_ids) if technology_ids is not None else None
        user_ids = unique_ids(user_ids) if user_ids is not None else None

        with self.project_repository.transaction():
            if technology_ids is not None:
                self._ensure_technologies_exist(technology_ids)
            if user_ids is not None:
                self._ensure_users_exist(user_ids)

            project = self.project_repository.find_by_id(project_id)
            if project is None:
                raise ProjectNotFoundError(project_id)

            if changes.get("rating") is not None and not 0.0 <= changes["rating"] <= 5.0:
                raise ValidationError("Rating must be between 0.0 and 5.0")
            project.apply_changes(changes)
            self.project_repository.update(project)

            if technology_ids is not None:
                self.project_repository.replace_technologies(project_id, technology_ids)
            if user_ids is not None:
                self.project_repository.replace_users(project_id, user_ids)

        logger.info(f"Updated project: {project_id}")
        return self._reload(project_id)

    def delete_project(self, project_id: str) -> None:
        """Supprime un projet et ses associations"""
        project_id = str(project_id)
        with self.project_repository.transaction():
            deleted = self.project_repository.delete(project_id)
            if not deleted:
                raise ProjectNotFoundError(project_id)
        logger.info(f"Deleted project: {project_id}")
