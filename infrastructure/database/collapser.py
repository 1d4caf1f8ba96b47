"""
Lecture d'un projet avec ses relations en une seule requête LEFT JOIN,
puis regroupement des lignes en un ProjectWithRelations
"""

import uuid
import logging
from typing import Any, Dict, Iterable, Optional

from sqlalchemy import Select, select

from domain.entities import Project, ProjectWithRelations, Technology, User, UserRole, UserWithRole
from domain.exceptions import InternalError
from infrastructure.database.mappers import as_utc
from infrastructure.database.models import (
    ProjectModel, ProjectTechnologyModel, ProjectUserModel, TechnologyModel, UserModel
)

logger = logging.getLogger(__name__)


def project_relations_statement(project_id: str) -> Select:
    """
    Un projet jointé (LEFT JOIN) à ses technologies et à ses utilisateurs.

    Produit une ligne par couple (technologie, utilisateur) ; les colonnes
    d'un côté sont NULL quand ce côté est vide.
    """
    return (
        select(
            ProjectModel.id.label("project_id"),
            ProjectModel.name.label("project_name"),
            ProjectModel.description.label("project_description"),
            ProjectModel.repository_url.label("project_repository_url"),
            ProjectModel.language.label("project_language"),
            ProjectModel.rating.label("project_rating"),
            ProjectModel.created_at.label("project_created_at"),
            ProjectModel.updated_at.label("project_updated_at"),
            TechnologyModel.id.label("tech_id"),
            TechnologyModel.name.label("tech_name"),
            TechnologyModel.description.label("tech_description"),
            TechnologyModel.created_at.label("tech_created_at"),
            UserModel.id.label("user_id"),
            UserModel.name.label("user_name"),
            UserModel.email.label("user_email"),
            UserModel.created_at.label("user_created_at"),
            ProjectUserModel.role.label("user_role"),
        )
        .select_from(ProjectModel)
        .outerjoin(ProjectTechnologyModel, ProjectTechnologyModel.project_id == ProjectModel.id)
        .outerjoin(TechnologyModel, TechnologyModel.id == ProjectTechnologyModel.technology_id)
        .outerjoin(ProjectUserModel, ProjectUserModel.project_id == ProjectModel.id)
        .outerjoin(UserModel, UserModel.id == ProjectUserModel.user_id)
        .where(ProjectModel.id == project_id)
        .order_by(TechnologyModel.name.asc(), UserModel.name.asc())
    )


def _is_uuid(value: Any) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def _project_from_row(row) -> Project:
    if not _is_uuid(row.project_id):
        raise InternalError(f"Invalid project id in store: '{row.project_id}'")
    return Project(
        id=row.project_id,
        name=row.project_name,
        description=row.project_description,
        repository_url=row.project_repository_url,
        language=row.project_language,
        rating=float(row.project_rating) if row.project_rating is not None else None,
        created_at=as_utc(row.project_created_at),
        updated_at=as_utc(row.project_updated_at)
    )


def collapse_project_rows(rows: Iterable[Any]) -> Optional[ProjectWithRelations]:
    """
    Regroupe les lignes du LEFT JOIN en un ProjectWithRelations.

    - aucune ligne : None (projet inconnu)
    - les champs du projet viennent de la première ligne
    - technologies et utilisateurs sont dédoublonnés par id, la première
      occurrence l'emporte
    - un rôle illisible écarte l'utilisateur
    - les deux listes sont triées par nom (tri stable)
    """
    project: Optional[Project] = None
    technologies: Dict[str, Technology] = {}
    users: Dict[str, UserWithRole] = {}

    for row in rows:
        if project is None:
            project = _project_from_row(row)

        if row.tech_id is not None and row.tech_name is not None and row.tech_id not in technologies:
            if _is_uuid(row.tech_id):
                technologies[row.tech_id] = Technology(
                    id=row.tech_id,
                    name=row.tech_name,
                    description=row.tech_description,
                    created_at=as_utc(row.tech_created_at)
                )
            else:
                logger.warning(f"Skipping technology with invalid id '{row.tech_id}' on project {project.id}")

        if (
            row.user_id is not None
            and row.user_name is not None
            and row.user_email is not None
            and row.user_role is not None
            and row.user_id not in users
        ):
            role = UserRole.parse(row.user_role)
            if role is None:
                logger.warning(
                    f"Dropping user {row.user_id} from project {project.id}: unknown role '{row.user_role}'"
                )
            elif not _is_uuid(row.user_id):
                logger.warning(f"Skipping user with invalid id '{row.user_id}' on project {project.id}")
            else:
                users[row.user_id] = UserWithRole(
                    user=User(
                        id=row.user_id,
                        name=row.user_name,
                        email=row.user_email,
                        created_at=as_utc(row.user_created_at)
                    ),
                    role=role
                )

    if project is None:
        return None

    return ProjectWithRelations(
        project=project,
        technologies=sorted(technologies.values(), key=lambda t: t.name),
        users=sorted(users.values(), key=lambda u: u.user.name)
    )
