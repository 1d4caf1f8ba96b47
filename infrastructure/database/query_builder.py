"""
Construction dynamique des requêtes de liste des projets (filtres, tri, pagination)
"""

import uuid
import logging
from typing import List, Optional

from sqlalchemy import Select, false, func, or_, select
from sqlalchemy.sql.elements import ColumnElement

from domain.entities.pagination import ListQueryParams
from infrastructure.database.models import (
    ProjectModel, ProjectTechnologyModel, ProjectUserModel, TechnologyModel
)

logger = logging.getLogger(__name__)

# Seules ces colonnes peuvent apparaître dans ORDER BY
SORTABLE_COLUMNS = {
    "name": ProjectModel.name,
    "created_at": ProjectModel.created_at,
    "updated_at": ProjectModel.updated_at,
    "rating": ProjectModel.rating,
}


def _contains(text: str) -> str:
    return f"%{text}%"


def normalize_uuid(value: Optional[str]) -> Optional[str]:
    """Forme canonique d'un UUID, ou None s'il est illisible"""
    if value is None:
        return None
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        return None


class ProjectQueryBuilder:
    """
    Traduit des ListQueryParams en deux requêtes paramétrées : un COUNT et
    un SELECT paginé.

    Les deux requêtes partagent la même liste ordonnée de prédicats, le
    total annoncé correspond donc toujours aux lignes filtrées. Toutes les
    valeurs venant du client passent en paramètres liés.
    """

    def __init__(self, params: ListQueryParams):
        self.params = params
        self.predicates: List[ColumnElement] = self._build_predicates()

    def _build_predicates(self) -> List[ColumnElement]:
        params = self.params
        predicates: List[ColumnElement] = []

        if params.search is not None:
            pattern = _contains(params.search)
            predicates.append(
                or_(
                    ProjectModel.name.ilike(pattern),
                    ProjectModel.description.ilike(pattern)
                )
            )

        if params.technology is not None:
            predicates.append(
                select(ProjectTechnologyModel.project_id)
                .join(TechnologyModel, ProjectTechnologyModel.technology_id == TechnologyModel.id)
                .where(
                    ProjectTechnologyModel.project_id == ProjectModel.id,
                    TechnologyModel.name.ilike(_contains(params.technology))
                )
                .exists()
            )

        if params.user_id is not None:
            user_id = normalize_uuid(params.user_id)
            if user_id is None:
                logger.debug(f"Ignoring unparsable user_id filter: '{params.user_id}'")
                predicates.append(false())
            else:
                predicates.append(
                    select(ProjectUserModel.project_id)
                    .where(
                        ProjectUserModel.project_id == ProjectModel.id,
                        ProjectUserModel.user_id == user_id
                    )
                    .exists()
                )

        # Une note NULL ne satisfait jamais une comparaison
        if params.min_rating is not None:
            predicates.append(ProjectModel.rating >= params.min_rating)
        if params.max_rating is not None:
            predicates.append(ProjectModel.rating <= params.max_rating)

        if params.language is not None:
            predicates.append(ProjectModel.language.ilike(_contains(params.language)))

        return predicates

    def count_statement(self) -> Select:
        """SELECT COUNT(*) sur les projets filtrés"""
        return select(func.count()).select_from(ProjectModel).where(*self.predicates)

    def select_statement(self) -> Select:
        """SELECT des projets filtrés, triés et paginés"""
        column = SORTABLE_COLUMNS[self.params.sort_field()]
        ordering = column.desc() if self.params.sort_descending() else column.asc()
        return (
            select(ProjectModel)
            .where(*self.predicates)
            .order_by(ordering, ProjectModel.id.asc())
            .limit(self.params.effective_page_size())
            .offset(self.params.offset())
        )
