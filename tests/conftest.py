"""Fixtures partagées : base SQLite en mémoire, sessions, client HTTP."""

import os

# Avant tout import applicatif : Config lit l'environnement à l'instanciation
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_DATA"] = "false"

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app import app
from application.services.project_service import ProjectService
from application.services.technology_service import TechnologyService
from application.services.user_service import UserService
from infrastructure.database.models import (
    Base, ProjectModel, ProjectTechnologyModel, ProjectUserModel, TechnologyModel, UserModel
)
from infrastructure.database.repositories import (
    SQLAlchemyProjectRepository, SQLAlchemyTechnologyRepository, SQLAlchemyUserRepository
)
from infrastructure.database.session import create_db_engine
from infrastructure.dependencies import get_db

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def project_service(session):
    return ProjectService(
        SQLAlchemyProjectRepository(session),
        SQLAlchemyTechnologyRepository(session),
        SQLAlchemyUserRepository(session)
    )


@pytest.fixture
def technology_service(session):
    return TechnologyService(SQLAlchemyTechnologyRepository(session))


@pytest.fixture
def user_service(session):
    return UserService(SQLAlchemyUserRepository(session))


@pytest.fixture
def client(session):
    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def add_technology(session):
    def _add(name, description=None):
        model = TechnologyModel(id=str(uuid.uuid4()), name=name, description=description, created_at=BASE_TIME)
        session.add(model)
        session.commit()
        return model.id
    return _add


@pytest.fixture
def add_user(session):
    def _add(name, email=None):
        model = UserModel(
            id=str(uuid.uuid4()),
            name=name,
            email=email or f"{name.lower().replace(' ', '.')}@example.com",
            created_at=BASE_TIME
        )
        session.add(model)
        session.commit()
        return model.id
    return _add


@pytest.fixture
def add_project(session):
    """Insère un projet ; `age_days` recule sa date de création."""
    def _add(name, language="Python", rating=None, description="A project",
             age_days=0, technologies=(), users=()):
        created = BASE_TIME - timedelta(days=age_days)
        model = ProjectModel(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
            repository_url="https://github.com/example/" + name.lower().replace(" ", "-"),
            language=language,
            rating=rating,
            created_at=created,
            updated_at=created
        )
        session.add(model)
        session.flush()
        for technology_id in technologies:
            session.add(ProjectTechnologyModel(project_id=model.id, technology_id=technology_id))
        for user_id, role in users:
            session.add(ProjectUserModel(project_id=model.id, user_id=user_id, role=role))
        session.commit()
        return model.id
    return _add
