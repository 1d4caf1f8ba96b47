"""Tests de l'initialisation de la base et des données de démonstration."""

from sqlalchemy import inspect
from sqlalchemy.orm import sessionmaker

from infrastructure.database.init_db import init_db
from infrastructure.database.models import ProjectModel, TechnologyModel, UserModel
from infrastructure.database.repositories import SQLAlchemyProjectRepository
from infrastructure.database.session import create_db_engine


def _counts(engine):
    session = sessionmaker(bind=engine)()
    try:
        return (
            session.query(TechnologyModel).count(),
            session.query(UserModel).count(),
            session.query(ProjectModel).count(),
        )
    finally:
        session.close()


def test_init_db_creates_tables_without_seed():
    engine = create_db_engine("sqlite://")
    init_db(engine, seed=False)

    tables = set(inspect(engine).get_table_names())
    assert {"projects", "technologies", "users", "project_technologies", "project_users"} <= tables
    assert _counts(engine) == (0, 0, 0)


def test_seed_loads_demo_data_once():
    engine = create_db_engine("sqlite://")
    init_db(engine, seed=True)
    init_db(engine, seed=True)

    assert _counts(engine) == (20, 8, 12)


def test_seeded_project_relations():
    engine = create_db_engine("sqlite://")
    init_db(engine, seed=True)
    session = sessionmaker(bind=engine)()
    try:
        project = SQLAlchemyProjectRepository(session).find_with_relations(
            "750e8400-e29b-41d4-a716-446655440001"
        )
    finally:
        session.close()

    assert project.project.name == "Rust Web API Starter"
    assert [t.name for t in project.technologies] == ["Axum", "Rust", "SQLite", "SQLx", "Tokio"]
    assert [(u.user.name, u.role.value) for u in project.users] == [
        ("Alice Johnson", "owner"),
        ("Bob Smith", "contributor"),
        ("Charlie Brown", "viewer"),
    ]
