"""Tests du regroupement des lignes LEFT JOIN en projet avec relations."""

from datetime import datetime, timezone
from types import SimpleNamespace

from domain.entities import UserRole
from domain.exceptions import InternalError
from infrastructure.database.collapser import collapse_project_rows
from infrastructure.database.repositories import SQLAlchemyProjectRepository

PROJECT_ID = "750e8400-e29b-41d4-a716-446655440001"
GO = ("550e8400-e29b-41d4-a716-446655440005", "Go")
RUST = ("550e8400-e29b-41d4-a716-446655440001", "Rust")
ANA = ("650e8400-e29b-41d4-a716-446655440001", "Ana", "ana@example.com")
BOB = ("650e8400-e29b-41d4-a716-446655440002", "Bob", "bob@example.com")
NOW = datetime(2024, 5, 1, 12, 0)


def row(tech=None, user=None, role=None, project_id=PROJECT_ID):
    return SimpleNamespace(
        project_id=project_id,
        project_name="Demo",
        project_description="Demo project",
        project_repository_url="https://example.com/demo",
        project_language="Rust",
        project_rating=4.5,
        project_created_at=NOW,
        project_updated_at=NOW,
        tech_id=tech[0] if tech else None,
        tech_name=tech[1] if tech else None,
        tech_description=None,
        tech_created_at=NOW if tech else None,
        user_id=user[0] if user else None,
        user_name=user[1] if user else None,
        user_email=user[2] if user else None,
        user_created_at=NOW if user else None,
        user_role=role,
    )


def test_no_rows_means_not_found():
    assert collapse_project_rows([]) is None


def test_project_without_relations_has_empty_lists():
    result = collapse_project_rows([row()])
    assert result.project.id == PROJECT_ID
    assert result.project.name == "Demo"
    assert result.technologies == []
    assert result.users == []


def test_naive_timestamps_are_read_as_utc():
    result = collapse_project_rows([row()])
    assert result.project.created_at.tzinfo == timezone.utc


def test_cartesian_rows_are_deduplicated_and_sorted():
    # Ordre volontairement inversé : Rust avant Go, Bob avant Ana
    rows = [
        row(RUST, BOB, "contributor"),
        row(RUST, ANA, "owner"),
        row(GO, BOB, "contributor"),
        row(GO, ANA, "owner"),
    ]
    result = collapse_project_rows(rows)

    assert [t.name for t in result.technologies] == ["Go", "Rust"]
    assert [(u.user.name, u.role) for u in result.users] == [
        ("Ana", UserRole.OWNER),
        ("Bob", UserRole.CONTRIBUTOR),
    ]


def test_first_occurrence_wins():
    rows = [row(RUST, ANA, "owner"), row(GO, ANA, "viewer")]
    result = collapse_project_rows(rows)
    assert len(result.users) == 1
    assert result.users[0].role == UserRole.OWNER


def test_unknown_role_drops_the_user():
    rows = [row(RUST, ANA, "overlord"), row(RUST, BOB, "viewer")]
    result = collapse_project_rows(rows)
    assert [u.user.name for u in result.users] == ["Bob"]
    assert [t.name for t in result.technologies] == ["Rust"]


def test_only_one_side_present():
    result = collapse_project_rows([row(user=ANA, role="owner")])
    assert result.technologies == []
    assert [u.user.email for u in result.users] == ["ana@example.com"]


def test_unparsable_project_id_is_internal_error():
    try:
        collapse_project_rows([row(project_id="garbage")])
        assert False, "collapse_project_rows aurait dû lever InternalError"
    except InternalError as exc:
        assert "garbage" in exc.message


def test_single_query_against_store(session, add_project, add_technology, add_user):
    rust = add_technology("Rust")
    go = add_technology("Go")
    ana = add_user("Ana")
    bob = add_user("Bob")
    project_id = add_project(
        "Polyglot",
        technologies=[rust, go],
        users=[(bob, "contributor"), (ana, "owner")]
    )

    result = SQLAlchemyProjectRepository(session).find_with_relations(project_id)

    assert result.project.name == "Polyglot"
    assert [t.name for t in result.technologies] == ["Go", "Rust"]
    assert [(u.user.name, u.role.value) for u in result.users] == [("Ana", "owner"), ("Bob", "contributor")]


def test_unknown_project_in_store(session):
    repository = SQLAlchemyProjectRepository(session)
    assert repository.find_with_relations("00000000-0000-0000-0000-000000000000") is None
