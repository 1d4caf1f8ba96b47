"""Tests HTTP des routes projets, technologies et utilisateurs."""

import uuid

from infrastructure.database.models import TechnologyModel

MISSING = "00000000-0000-4000-8000-000000000000"


def _project_payload(**overrides):
    payload = {
        "name": "Web API",
        "description": "REST backend",
        "repository_url": "https://github.com/example/web-api",
        "language": "Rust",
        "rating": 4.5,
    }
    payload.update(overrides)
    return payload


# ============================================================================
# TECHNOLOGIES / UTILISATEURS
# ============================================================================

def test_create_and_list_technologies(client):
    response = client.post("/technologies", json={"name": "Rust", "description": "Fast"})
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Rust"
    uuid.UUID(body["id"])

    client.post("/technologies", json={"name": "Go"})
    listing = client.get("/technologies")
    assert listing.status_code == 200
    assert [t["name"] for t in listing.json()] == ["Go", "Rust"]


def test_duplicate_technology_is_conflict(client, session):
    client.post("/technologies", json={"name": "Rust"})
    response = client.post("/technologies", json={"name": "Rust"})

    assert response.status_code == 409
    assert response.json() == {"error": "Technology with name 'Rust' already exists"}
    assert session.query(TechnologyModel).count() == 1


def test_technology_name_too_long(client):
    response = client.post("/technologies", json={"name": "x" * 101})
    assert response.status_code == 400
    assert "name" in response.json()["error"]


def test_create_user_and_duplicate_email(client):
    first = client.post("/users", json={"name": "Alice", "email": "alice@example.com"})
    assert first.status_code == 201
    assert first.json()["email"] == "alice@example.com"

    second = client.post("/users", json={"name": "Alice Bis", "email": "alice@example.com"})
    assert second.status_code == 409
    assert second.json() == {"error": "User with email 'alice@example.com' already exists"}


def test_invalid_email_is_bad_request(client):
    response = client.post("/users", json={"name": "Alice", "email": "not-an-email"})
    assert response.status_code == 400
    assert set(response.json()) == {"error"}
    assert "email" in response.json()["error"]


def test_users_listed_by_name(client):
    client.post("/users", json={"name": "Zoe", "email": "zoe@example.com"})
    client.post("/users", json={"name": "Adam", "email": "adam@example.com"})
    assert [u["name"] for u in client.get("/users").json()] == ["Adam", "Zoe"]


# ============================================================================
# PROJETS
# ============================================================================

def test_project_lifecycle(client):
    rust = client.post("/technologies", json={"name": "Rust"}).json()["id"]
    axum = client.post("/technologies", json={"name": "Axum"}).json()["id"]
    bob = client.post("/users", json={"name": "Bob", "email": "bob@example.com"}).json()["id"]
    ana = client.post("/users", json={"name": "Ana", "email": "ana@example.com"}).json()["id"]

    created = client.post(
        "/projects",
        json=_project_payload(technology_ids=[rust, axum], user_ids=[ana, bob])
    )
    assert created.status_code == 201
    body = created.json()
    project_id = body["id"]
    assert [t["name"] for t in body["technologies"]] == ["Axum", "Rust"]
    assert [(u["name"], u["role"]) for u in body["users"]] == [("Ana", "owner"), ("Bob", "contributor")]
    assert body["repository_url"] == "https://github.com/example/web-api"

    fetched = client.get(f"/projects/{project_id}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Web API"

    updated = client.put(f"/projects/{project_id}", json={"rating": None, "technology_ids": []})
    assert updated.status_code == 200
    assert updated.json()["rating"] is None
    assert updated.json()["technologies"] == []
    assert len(updated.json()["users"]) == 2

    deleted = client.delete(f"/projects/{project_id}")
    assert deleted.status_code == 204
    assert deleted.content == b""

    assert client.get(f"/projects/{project_id}").status_code == 404
    assert client.delete(f"/projects/{project_id}").status_code == 404


def test_get_unknown_project(client):
    response = client.get(f"/projects/{MISSING}")
    assert response.status_code == 404
    assert response.json() == {"error": f"Project not found with id: {MISSING}"}


def test_malformed_project_id_is_bad_request(client):
    response = client.get("/projects/not-a-uuid")
    assert response.status_code == 400
    assert "error" in response.json()


def test_create_project_with_unknown_technology(client):
    response = client.post("/projects", json=_project_payload(technology_ids=[MISSING]))
    assert response.status_code == 404
    assert response.json() == {"error": f"Technology not found with id: {MISSING}"}
    assert client.get("/projects").json()["pagination"]["total_items"] == 0


def test_create_project_validation(client):
    assert client.post("/projects", json=_project_payload(name="")).status_code == 400
    assert client.post("/projects", json=_project_payload(rating=5.5)).status_code == 400
    assert client.post("/projects", json=_project_payload(repository_url="not a url")).status_code == 400
    assert client.post("/projects", json=_project_payload(language="x" * 101)).status_code == 400
    assert client.post("/projects", json=_project_payload(technology_ids=["nope"])).status_code == 400


def test_update_unknown_project(client):
    response = client.put(f"/projects/{MISSING}", json={"name": "Ghost"})
    assert response.status_code == 404


def test_list_projects_pagination_envelope(client, add_project):
    for i in range(3):
        add_project(f"P{i}", age_days=i)

    response = client.get("/projects", params={"page_size": 500, "page": 0})
    assert response.status_code == 200
    body = response.json()
    assert body["pagination"] == {"page": 1, "page_size": 100, "total_items": 3, "total_pages": 1}
    assert [p["name"] for p in body["data"]] == ["P0", "P1", "P2"]


def test_list_projects_empty_store(client):
    body = client.get("/projects").json()
    assert body["data"] == []
    assert body["pagination"]["total_pages"] == 1


def test_bogus_sort_field_does_not_fail(client, add_project):
    add_project("Older", age_days=3)
    add_project("Newer", age_days=1)
    response = client.get("/projects", params={"sort": "bogus_field"})
    assert response.status_code == 200
    assert [p["name"] for p in response.json()["data"]] == ["Newer", "Older"]


def test_bad_query_type_is_bad_request(client):
    response = client.get("/projects", params={"page": "abc"})
    assert response.status_code == 400
    assert "page" in response.json()["error"]


def test_tech_alias_and_precedence(client, add_project, add_technology):
    rust = add_technology("Rust")
    go = add_technology("Go")
    add_project("Engine", technologies=[rust])
    add_project("Service", technologies=[go])

    alias = client.get("/projects", params={"tech": "rust"}).json()
    assert [p["name"] for p in alias["data"]] == ["Engine"]

    both = client.get("/projects", params={"technology": "go", "tech": "rust"}).json()
    assert [p["name"] for p in both["data"]] == ["Service"]


def test_rating_filter_over_http(client, add_project):
    add_project("Good", rating=4.0)
    add_project("Great", rating=5.0)
    add_project("Meh", rating=2.0)
    add_project("Unrated")

    body = client.get("/projects", params={"min_rating": 4.0, "max_rating": 5.0}).json()
    assert sorted(p["name"] for p in body["data"]) == ["Good", "Great"]
    assert body["pagination"]["total_items"] == 2


def test_huge_page_number_is_bad_request(client):
    response = client.get("/projects", params={"page": 10**19})
    assert response.status_code == 400
    assert "page" in response.json()["error"]


def test_last_representable_page_is_empty(client, add_project):
    from domain.entities.pagination import MAX_PAGE

    add_project("Only")
    response = client.get("/projects", params={"page": MAX_PAGE})
    assert response.status_code == 200
    body = response.json()
    assert body["data"] == []
    assert body["pagination"]["page"] == MAX_PAGE
