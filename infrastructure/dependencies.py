"""
Dépendances FastAPI pour l'injection de services
"""

from typing import Generator
from sqlalchemy.orm import Session
from fastapi import Depends

from infrastructure.database.session import SessionLocal
from infrastructure.database.repositories import (
    SQLAlchemyProjectRepository,
    SQLAlchemyTechnologyRepository,
    SQLAlchemyUserRepository
)
from application.services.project_service import ProjectService
from application.services.technology_service import TechnologyService
from application.services.user_service import UserService


def get_db() -> Generator[Session, None, None]:
    """Dépendance pour obtenir une session de base de données"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_project_repository(db: Session = Depends(get_db)) -> SQLAlchemyProjectRepository:
    """Dépendance pour obtenir le ProjectRepository"""
    return SQLAlchemyProjectRepository(db)


def get_technology_repository(db: Session = Depends(get_db)) -> SQLAlchemyTechnologyRepository:
    """Dépendance pour obtenir le TechnologyRepository"""
    return SQLAlchemyTechnologyRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    """Dépendance pour obtenir le UserRepository"""
    return SQLAlchemyUserRepository(db)


def get_project_service(
    project_repository: SQLAlchemyProjectRepository = Depends(get_project_repository),
    technology_repository: SQLAlchemyTechnologyRepository = Depends(get_technology_repository),
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository)
) -> ProjectService:
    """Dépendance pour obtenir le ProjectService (les trois repositories partagent la session)"""
    return ProjectService(project_repository, technology_repository, user_repository)


def get_technology_service(
    technology_repository: SQLAlchemyTechnologyRepository = Depends(get_technology_repository)
) -> TechnologyService:
    """Dépendance pour obtenir le TechnologyService"""
    return TechnologyService(technology_repository)


def get_user_service(
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository)
) -> UserService:
    """Dépendance pour obtenir le UserService"""
    return UserService(user_repository)
