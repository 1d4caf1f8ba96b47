"""
Mappers - Conversion entre modèles SQLAlchemy et entités de domaine
"""

from datetime import datetime, timezone
from typing import Optional
from infrastructure.database.models import (
    ProjectModel, TechnologyModel, UserModel
)
from domain.entities import Project, Technology, User


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite relit des datetimes naïfs : on les considère en UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ProjectMapper:
    """Mapper entre ProjectModel et Project"""

    @staticmethod
    def to_domain(model: ProjectModel) -> Project:
        """Convertit un ProjectModel en entité Project"""
        return Project(
            id=model.id,
            name=model.name,
            description=model.description,
            repository_url=model.repository_url,
            language=model.language,
            rating=float(model.rating) if model.rating is not None else None,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at)
        )

    @staticmethod
    def to_model(project: Project, model: Optional[ProjectModel] = None) -> ProjectModel:
        """Convertit une entité Project en ProjectModel"""
        if model is None:
            model = ProjectModel()

        model.id = project.id
        model.name = project.name
        model.description = project.description
        model.repository_url = project.repository_url
        model.language = project.language
        model.rating = project.rating
        model.created_at = project.created_at
        model.updated_at = project.updated_at

        return model


class TechnologyMapper:
    """Mapper entre TechnologyModel et Technology"""

    @staticmethod
    def to_domain(model: TechnologyModel) -> Technology:
        """Convertit un TechnologyModel en entité Technology"""
        return Technology(
            id=model.id,
            name=model.name,
            description=model.description,
            created_at=as_utc(model.created_at)
        )

    @staticmethod
    def to_model(technology: Technology, model: Optional[TechnologyModel] = None) -> TechnologyModel:
        """Convertit une entité Technology en TechnologyModel"""
        if model is None:
            model = TechnologyModel()

        model.id = technology.id
        model.name = technology.name
        model.description = technology.description
        model.created_at = technology.created_at

        return model


class UserMapper:
    """Mapper entre UserModel et User"""

    @staticmethod
    def to_domain(model: UserModel) -> User:
        """Convertit un UserModel en entité User"""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            created_at=as_utc(model.created_at)
        )

    @staticmethod
    def to_model(user: User, model: Optional[UserModel] = None) -> UserModel:
        """Convertit une entité User en UserModel"""
        if model is None:
            model = UserModel()

        model.id = user.id
        model.name = user.name
        model.email = user.email
        model.created_at = user.created_at

        return model
