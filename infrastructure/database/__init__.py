"""
Infrastructure Database - Configuration et repositories SQLAlchemy
"""

from infrastructure.database.session import SessionLocal, engine
from infrastructure.database.models import (
    Base, ProjectModel, TechnologyModel, UserModel, ProjectTechnologyModel, ProjectUserModel
)
from infrastructure.database.repositories import (
    SQLAlchemyProjectRepository,
    SQLAlchemyTechnologyRepository,
    SQLAlchemyUserRepository
)

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "ProjectModel",
    "TechnologyModel",
    "UserModel",
    "ProjectTechnologyModel",
    "ProjectUserModel",
    "SQLAlchemyProjectRepository",
    "SQLAlchemyTechnologyRepository",
    "SQLAlchemyUserRepository"
]
