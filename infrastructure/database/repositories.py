"""
Implémentations des repositories SQLAlchemy
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple
from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from domain.entities import (
    ListQueryParams, Project, ProjectWithRelations, Technology, User, UserRole
)
from domain.exceptions import AppError, DuplicateResourceError, StoreError
from domain.repositories import (
    ProjectRepository, TechnologyRepository, UserRepository
)
from infrastructure.database.collapser import collapse_project_rows, project_relations_statement
from infrastructure.database.mappers import (
    ProjectMapper, TechnologyMapper, UserMapper
)
from infrastructure.database.models import (
    ProjectModel, ProjectTechnologyModel, ProjectUserModel, TechnologyModel, UserModel
)
from infrastructure.database.query_builder import ProjectQueryBuilder

logger = logging.getLogger(__name__)


class SQLAlchemyRepository:
    """Base commune : session partagée et portée transactionnelle"""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """
        Commit en sortie de bloc, rollback sur toute erreur.

        Les erreurs SQLAlchemy sont converties en StoreError ; les erreurs
        applicatives sont relancées telles quelles.
        """
        try:
            yield
            self.session.commit()
        except AppError:
            self.session.rollback()
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Database error: {e}", exc_info=True)
            raise StoreError(f"Database error: {e}") from e
        except Exception:
            self.session.rollback()
            raise

    def _read(self, operation: str, statement):
        """Exécute une lecture hors transaction explicite"""
        try:
            return self.session.execute(statement)
        except SQLAlchemyError as e:
            logger.error(f"Database error while {operation}: {e}", exc_info=True)
            raise StoreError(f"Database error: {e}") from e


class SQLAlchemyTechnologyRepository(SQLAlchemyRepository, TechnologyRepository):
    """Implémentation SQLAlchemy du TechnologyRepository"""

    def find_by_name(self, name: str) -> Optional[Technology]:
        """Trouve une technologie par son nom"""
        model = self._read(
            "finding technology by name",
            select(TechnologyModel).where(TechnologyModel.name == name)
        ).scalar_one_or_none()
        return TechnologyMapper.to_domain(model) if model else None

    def exists(self, technology_id: str) -> bool:
        return bool(self._read(
            "checking technology existence",
            select(exists().where(TechnologyModel.id == technology_id))
        ).scalar())

    def find_all(self) -> List[Technology]:
        """Retourne toutes les technologies triées par nom"""
        models = self._read(
            "listing technologies",
            select(TechnologyModel).order_by(TechnologyModel.name.asc())
        ).scalars().all()
        return [TechnologyMapper.to_domain(model) for model in models]

    def add(self, technology: Technology) -> Technology:
        """Insère une technologie"""
        model = TechnologyMapper.to_model(technology)
        self.session.add(model)
        try:
            self.session.flush()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Unique constraint rejected technology '{technology.name}': {e.orig}")
            raise DuplicateResourceError(f"Technology with name '{technology.name}' already exists") from e
        return TechnologyMapper.to_domain(model)


class SQLAlchemyUserRepository(SQLAlchemyRepository, UserRepository):
    """Implémentation SQLAlchemy du UserRepository"""

    def find_by_email(self, email: str) -> Optional[User]:
        """Trouve un utilisateur par son email"""
        model = self._read(
            "finding user by email",
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()
        return UserMapper.to_domain(model) if model else None

    def exists(self, user_id: str) -> bool:
        return bool(self._read(
            "checking user existence",
            select(exists().where(UserModel.id == user_id))
        ).scalar())

    def find_all(self) -> List[User]:
        """Retourne tous les utilisateurs triés par nom"""
        models = self._read(
            "listing users",
            select(UserModel).order_by(UserModel.name.asc())
        ).scalars().all()
        return [UserMapper.to_domain(model) for model in models]

    def add(self, user: User) -> User:
        """Insère un utilisateur"""
        model = UserMapper.to_model(user)
        self.session.add(model)
        try:
            self.session.flush()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Unique constraint rejected user email '{user.email}': {e.orig}")
            raise DuplicateResourceError(f"User with email '{user.email}' already exists") from e
        return UserMapper.to_domain(model)


class SQLAlchemyProjectRepository(SQLAlchemyRepository, ProjectRepository):
    """Implémentation SQLAlchemy du ProjectRepository"""

    def find_by_id(self, project_id: str) -> Optional[Project]:
        """Trouve un projet par son ID"""
        model = self.session.get(ProjectModel, project_id)
        return ProjectMapper.to_domain(model) if model else None

    def find_with_relations(self, project_id: str) -> Optional[ProjectWithRelations]:
        """Trouve un projet avec ses technologies et utilisateurs (une seule requête)"""
        rows = self._read("loading project relations", project_relations_statement(project_id)).all()
        return collapse_project_rows(rows)

    def find_page(self, params: ListQueryParams) -> Tuple[List[Project], int]:
        """Retourne la page demandée et le nombre total de projets filtrés"""
        builder = ProjectQueryBuilder(params)
        total_items = self._read("counting projects", builder.count_statement()).scalar_one()
        models = self._read("listing projects", builder.select_statement()).scalars().all()
        return [ProjectMapper.to_domain(model) for model in models], int(total_items)

    def add(self, project: Project) -> Project:
        """Insère un projet"""
        model = ProjectMapper.to_model(project)
        self.session.add(model)
        self.session.flush()
        return ProjectMapper.to_domain(model)

    def update(self, project: Project) -> Project:
        """Met à jour les champs scalaires d'un projet"""
        model = self.session.get(ProjectModel, project.id)
        if model is None:
            return project
        ProjectMapper.to_model(project, model)
        self.session.flush()
        return ProjectMapper.to_domain(model)

    def delete(self, project_id: str) -> bool:
        """Supprime les associations puis le projet"""
        self.session.execute(
            delete(ProjectTechnologyModel).where(ProjectTechnologyModel.project_id == project_id)
        )
        self.session.execute(
            delete(ProjectUserModel).where(ProjectUserModel.project_id == project_id)
        )
        result = self.session.execute(
            delete(ProjectModel).where(ProjectModel.id == project_id)
        )
        return result.rowcount > 0

    def replace_technologies(self, project_id: str, technology_ids: List[str]) -> None:
        """Remplace toutes les associations projet-technologie, dans l'ordre donné"""
        self.session.execute(
            delete(ProjectTechnologyModel).where(ProjectTechnologyModel.project_id == project_id)
        )
        for technology_id in technology_ids:
            self.session.add(ProjectTechnologyModel(project_id=project_id, technology_id=technology_id))
        self.session.flush()

    def replace_users(self, project_id: str, user_ids: List[str]) -> None:
        """Remplace toutes les associations projet-utilisateur (premier = owner)"""
        self.session.execute(
            delete(ProjectUserModel).where(ProjectUserModel.project_id == project_id)
        )
        for index, user_id in enumerate(user_ids):
            self.session.add(ProjectUserModel(
                project_id=project_id,
                user_id=user_id,
                role=UserRole.for_position(index).value
            ))
        self.session.flush()
