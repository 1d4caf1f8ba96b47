"""Tests unitaires pour TechnologyService et UserService."""

from domain.exceptions import DuplicateResourceError
from infrastructure.database.models import TechnologyModel, UserModel


def test_create_technology(technology_service):
    technology = technology_service.create_technology("Rust", "Systems language")
    assert technology.name == "Rust"
    assert technology.description == "Systems language"
    assert technology.created_at is not None


def test_duplicate_technology_raises(technology_service, session):
    technology_service.create_technology("Rust")
    try:
        technology_service.create_technology("Rust")
        assert False, "create_technology aurait dû lever DuplicateResourceError"
    except DuplicateResourceError as exc:
        assert exc.message == "Technology with name 'Rust' already exists"
    assert session.query(TechnologyModel).count() == 1


def test_technologies_listed_by_name(technology_service):
    for name in ("Tokio", "Axum", "Postgres"):
        technology_service.create_technology(name)
    assert [t.name for t in technology_service.list_technologies()] == ["Axum", "Postgres", "Tokio"]


def test_create_user(user_service):
    user = user_service.create_user("Alice Johnson", "alice.johnson@example.com")
    assert user.email == "alice.johnson@example.com"


def test_duplicate_email_raises(user_service, session):
    user_service.create_user("Alice", "alice@example.com")
    try:
        user_service.create_user("Other Alice", "alice@example.com")
        assert False, "create_user aurait dû lever DuplicateResourceError"
    except DuplicateResourceError as exc:
        assert "alice@example.com" in exc.message
    assert session.query(UserModel).count() == 1


def test_users_listed_by_name(user_service):
    user_service.create_user("Zoe", "zoe@example.com")
    user_service.create_user("Adam", "adam@example.com")
    assert [u.name for u in user_service.list_users()] == ["Adam", "Zoe"]


def test_store_uniqueness_is_the_backstop(user_service, session):
    # Contourne la pré-vérification pour atteindre la contrainte UNIQUE
    user_service.create_user("Alice", "alice@example.com")
    repository = user_service.user_repository
    repository.find_by_email = lambda email: None
    try:
        user_service.create_user("Again", "alice@example.com")
        assert False, "la contrainte UNIQUE aurait dû produire DuplicateResourceError"
    except DuplicateResourceError as exc:
        assert exc.message == "User with email 'alice@example.com' already exists"
    assert session.query(UserModel).count() == 1
