"""
Modèles SQLAlchemy - Tables projets, technologies, utilisateurs et associations
"""

import uuid
import logging
from datetime import datetime, timezone
from sqlalchemy import (
    Column, String, Float, Text, DateTime, ForeignKey, CheckConstraint, Index
)
from sqlalchemy.orm import relationship
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


def utc_now():
    return datetime.now(timezone.utc)


def generate_id():
    return str(uuid.uuid4())


class ProjectModel(Base):
    """Modèle SQLAlchemy pour les projets"""
    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint(
            "rating IS NULL OR (rating >= 0.0 AND rating <= 5.0)",
            name="ck_projects_rating_range"
        ),
        Index("idx_projects_language_rating", "language", "rating"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    repository_url = Column(Text, nullable=False)
    language = Column(String(100), nullable=False, index=True)
    rating = Column(Float, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    technology_links = relationship(
        "ProjectTechnologyModel",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
    user_links = relationship(
        "ProjectUserModel",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True
    )


class TechnologyModel(Base):
    """Modèle SQLAlchemy pour les technologies"""
    __tablename__ = "technologies"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(100), unique=True, index=True, nullable=False)
    description = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)


class UserModel(Base):
    """Modèle SQLAlchemy pour les utilisateurs"""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(320), unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)


class ProjectTechnologyModel(Base):
    """Table d'association Project-Technology"""
    __tablename__ = "project_technologies"

    project_id = Column(
        String(36), ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    technology_id = Column(
        String(36), ForeignKey("technologies.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    project = relationship("ProjectModel", back_populates="technology_links")


class ProjectUserModel(Base):
    """Table d'association Project-User (avec rôle)"""
    __tablename__ = "project_users"
    __table_args__ = (
        CheckConstraint(
            "role IN ('owner', 'contributor', 'viewer')",
            name="ck_project_users_role"
        ),
    )

    project_id = Column(
        String(36), ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    role = Column(String(20), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    project = relationship("ProjectModel", back_populates="user_links")
