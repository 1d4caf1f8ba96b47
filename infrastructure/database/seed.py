"""
Données de démonstration (technologies, utilisateurs, projets et leurs relations)
"""

import logging
from datetime import datetime, timedelta, timezone
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from infrastructure.database.models import (
    ProjectModel, ProjectTechnologyModel, ProjectUserModel, TechnologyModel, UserModel
)

logger = logging.getLogger(__name__)


def _tech_id(n: int) -> str:
    return f"550e8400-e29b-41d4-a716-4466554400{n:02d}"


def _user_id(n: int) -> str:
    return f"650e8400-e29b-41d4-a716-4466554400{n:02d}"


def _project_id(n: int) -> str:
    return f"750e8400-e29b-41d4-a716-4466554400{n:02d}"


TECHNOLOGIES = [
    (1, "Rust", "Systems programming language focused on safety, speed, and concurrency"),
    (2, "Python", "High-level programming language known for simplicity and versatility"),
    (3, "JavaScript", "Programming language for web development and beyond"),
    (4, "TypeScript", "Typed superset of JavaScript for large-scale applications"),
    (5, "Go", "Statically typed, compiled language designed at Google"),
    (6, "Axum", "Ergonomic and modular web framework for Rust"),
    (7, "SQLx", "Async SQL toolkit for Rust with compile-time checked queries"),
    (8, "React", "JavaScript library for building user interfaces"),
    (9, "Next.js", "React framework for production-grade applications"),
    (10, "PostgreSQL", "Advanced open source relational database"),
    (11, "SQLite", "Lightweight, serverless SQL database engine"),
    (12, "Docker", "Platform for developing, shipping, and running applications in containers"),
    (13, "Kubernetes", "Container orchestration platform for automating deployment"),
    (14, "Redis", "In-memory data structure store used as database and cache"),
    (15, "GraphQL", "Query language for APIs and runtime for executing queries"),
    (16, "Tokio", "Asynchronous runtime for Rust"),
    (17, "FastAPI", "Modern, fast web framework for building APIs with Python"),
    (18, "Django", "High-level Python web framework"),
    (19, "Node.js", "JavaScript runtime built on Chrome V8 engine"),
    (20, "Express", "Minimal and flexible Node.js web application framework"),
]

# (n, nom, email, créé il y a N jours)
USERS = [
    (1, "Alice Johnson", "alice.johnson@example.com", 180),
    (2, "Bob Smith", "bob.smith@example.com", 150),
    (3, "Charlie Brown", "charlie.brown@example.com", 120),
    (4, "Diana Prince", "diana.prince@example.com", 90),
    (5, "Eve Martinez", "eve.martinez@example.com", 60),
    (6, "Frank Zhang", "frank.zhang@example.com", 45),
    (7, "Grace Lee", "grace.lee@example.com", 30),
    (8, "Henry Wilson", "henry.wilson@example.com", 15),
]

# (n, nom, description, dépôt, langage, note, créé il y a, modifié il y a)
PROJECTS = [
    (1, "Rust Web API Starter",
     "A production-ready starter template for building REST APIs with Rust, Axum, and SQLx.",
     "https://github.com/example/rust-web-api-starter", "Rust", 4.8, 60, 5),
    (2, "E-commerce Platform",
     "Full-stack e-commerce platform with React frontend and Python FastAPI backend.",
     "https://github.com/example/ecommerce-platform", "Python", 4.5, 90, 10),
    (3, "Task Management System",
     "Collaborative task management and project tracking system built with Next.js and PostgreSQL.",
     "https://github.com/example/task-manager", "TypeScript", 4.7, 45, 2),
    (4, "Microservices Template",
     "Production-ready microservices architecture template using Go, Docker, and Kubernetes.",
     "https://github.com/example/microservices-template", "Go", 4.9, 120, 20),
    (5, "Real-time Chat Application",
     "WebSocket-based real-time chat application with React frontend and Node.js backend.",
     "https://github.com/example/realtime-chat", "JavaScript", 4.3, 75, 8),
    (6, "Machine Learning Pipeline",
     "End-to-end ML pipeline for training, evaluating, and deploying models.",
     "https://github.com/example/ml-pipeline", "Python", 4.6, 100, 15),
    (7, "GraphQL API Server",
     "Flexible GraphQL API server with TypeScript, Apollo Server, and PostgreSQL.",
     "https://github.com/example/graphql-server", "TypeScript", 4.4, 55, 7),
    (8, "IoT Data Collector",
     "High-performance IoT data collection and processing system built with Rust.",
     "https://github.com/example/iot-collector", "Rust", 4.9, 80, 3),
    (9, "Content Management System",
     "Headless CMS with Django backend and React admin interface.",
     "https://github.com/example/headless-cms", "Python", 4.2, 110, 12),
    (10, "Mobile Backend Service",
     "Backend-as-a-Service for mobile apps with authentication, push notifications, and cloud storage.",
     "https://github.com/example/mobile-backend", "JavaScript", 4.5, 65, 6),
    (11, "Analytics Dashboard",
     "Real-time analytics dashboard with data visualization and reporting.",
     "https://github.com/example/analytics-dashboard", "TypeScript", None, 30, 1),
    (12, "API Gateway",
     "High-performance API gateway with rate limiting, authentication, and load balancing.",
     "https://github.com/example/api-gateway", "Rust", None, 25, 4),
]

PROJECT_TECHNOLOGIES = {
    1: [1, 6, 7, 11, 16],
    2: [2, 17, 8, 10, 14, 12],
    3: [4, 9, 10, 8],
    4: [5, 12, 13, 10],
    5: [3, 19, 20, 8, 14],
    6: [2, 12],
    7: [4, 15, 10, 19],
    8: [1, 16, 14, 12],
    9: [2, 18, 8, 10],
    10: [3, 19, 14],
    11: [4, 9, 10],
    12: [1, 16, 14],
}

PROJECT_USERS = {
    1: [(1, "owner"), (2, "contributor"), (3, "viewer")],
    2: [(2, "owner"), (4, "contributor"), (5, "contributor")],
    3: [(3, "owner"), (1, "contributor")],
    4: [(4, "owner"), (6, "contributor"), (7, "contributor"), (8, "viewer")],
    5: [(5, "owner"), (2, "contributor")],
    6: [(6, "owner"), (4, "contributor")],
    7: [(7, "owner"), (3, "contributor"), (5, "viewer")],
    8: [(8, "owner"), (1, "contributor"), (6, "contributor")],
    9: [(1, "owner"), (7, "contributor")],
    10: [(2, "owner"), (8, "contributor")],
    11: [(3, "owner")],
    12: [(4, "owner"), (1, "contributor")],
}


def is_empty(session: Session) -> bool:
    """Vrai si aucune des tables principales ne contient de ligne"""
    for model in (ProjectModel, TechnologyModel, UserModel):
        if session.execute(select(func.count()).select_from(model)).scalar_one():
            return False
    return True


def seed_demo_data(session: Session) -> None:
    """Insère le jeu de démonstration et commit"""
    now = datetime.now(timezone.utc)

    def days_ago(days: int) -> datetime:
        return now - timedelta(days=days)

    session.add_all(
        TechnologyModel(id=_tech_id(n), name=name, description=description, created_at=now)
        for n, name, description in TECHNOLOGIES
    )
    session.add_all(
        UserModel(id=_user_id(n), name=name, email=email, created_at=days_ago(age))
        for n, name, email, age in USERS
    )
    session.add_all(
        ProjectModel(
            id=_project_id(n),
            name=name,
            description=description,
            repository_url=url,
            language=language,
            rating=rating,
            created_at=days_ago(created),
            updated_at=days_ago(updated)
        )
        for n, name, description, url, language, rating, created, updated in PROJECTS
    )
    session.flush()

    for project, technologies in PROJECT_TECHNOLOGIES.items():
        session.add_all(
            ProjectTechnologyModel(project_id=_project_id(project), technology_id=_tech_id(t), created_at=now)
            for t in technologies
        )
    for project, members in PROJECT_USERS.items():
        session.add_all(
            ProjectUserModel(project_id=_project_id(project), user_id=_user_id(u), role=role, created_at=now)
            for u, role in members
        )

    session.commit()
    logger.info(
        f"🌱 Seeded {len(TECHNOLOGIES)} technologies, {len(USERS)} users and {len(PROJECTS)} projects"
    )
