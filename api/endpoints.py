"""
projects-api/api/endpoints.py
Endpoints de l'API : projets, technologies, utilisateurs
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from api.schemas import (
    ErrorResponse, PaginatedProjectsResponse, ProjectCreate, ProjectUpdate,
    ProjectWithRelationsResponse, TechnologyCreate, TechnologyResponse,
    UserCreate, UserResponse
)
from application.services.project_service import ProjectService
from application.services.technology_service import TechnologyService
from application.services.user_service import UserService
from domain.entities.pagination import MAX_PAGE, ListQueryParams
from infrastructure.dependencies import (
    get_project_service, get_technology_service, get_user_service
)

logger = logging.getLogger(__name__)

projects_router = APIRouter(prefix="/projects", tags=["projects"])
technologies_router = APIRouter(prefix="/technologies", tags=["technologies"])
users_router = APIRouter(prefix="/users", tags=["users"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Requête invalide"},
    500: {"model": ErrorResponse, "description": "Erreur interne"},
}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Ressource introuvable"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Ressource déjà existante"}}

# ============================================================================
# PROJETS
# ============================================================================

@projects_router.get("", response_model=PaginatedProjectsResponse, responses=ERROR_RESPONSES)
def list_projects(
    search: Optional[str] = Query(None, description="Sous-chaîne du nom ou de la description"),
    technology: Optional[str] = Query(None, description="Nom de technologie (sous-chaîne)"),
    tech: Optional[str] = Query(None, description="Alias de technology"),
    user_id: Optional[str] = Query(None, description="UUID d'un utilisateur associé"),
    min_rating: Optional[float] = Query(None),
    max_rating: Optional[float] = Query(None),
    language: Optional[str] = Query(None, description="Langage (sous-chaîne)"),
    sort: Optional[str] = Query(None, description="name, created_at, updated_at ou rating"),
    order: Optional[str] = Query(None, description="asc ou desc"),
    page: Optional[int] = Query(None, le=MAX_PAGE, description="Numéro de page (à partir de 1)"),
    page_size: Optional[int] = Query(None, le=MAX_PAGE, description="Éléments par page (max 100)"),
    service: ProjectService = Depends(get_project_service)
):
    """
    Liste paginée des projets.

    Les filtres se combinent (ET logique). Un champ de tri inconnu retombe
    sur created_at, un ordre inconnu sur desc.
    """
    params = ListQueryParams(
        search=search,
        technology=technology if technology is not None else tech,
        user_id=user_id,
        min_rating=min_rating,
        max_rating=max_rating,
        language=language,
        sort=sort,
        order=order,
        page=page,
        page_size=page_size
    )
    return PaginatedProjectsResponse.from_page(service.list_projects(params))


@projects_router.get(
    "/{project_id}",
    response_model=ProjectWithRelationsResponse,
    responses={**ERROR_RESPONSES, **NOT_FOUND}
)
def get_project(project_id: UUID, service: ProjectService = Depends(get_project_service)):
    """Récupère un projet avec ses technologies et utilisateurs"""
    return ProjectWithRelationsResponse.from_read_model(service.get_project(str(project_id)))


@projects_router.post(
    "",
    response_model=ProjectWithRelationsResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**ERROR_RESPONSES, **NOT_FOUND}
)
def create_project(payload: ProjectCreate, service: ProjectService = Depends(get_project_service)):
    """Crée un projet ; le premier utilisateur listé en devient propriétaire"""
    created = service.create_project(
        name=payload.name,
        description=payload.description,
        repository_url=payload.repository_url,
        language=payload.language,
        rating=payload.rating,
        technology_ids=payload.technology_ids,
        user_ids=payload.user_ids
    )
    return ProjectWithRelationsResponse.from_read_model(created)


@projects_router.put(
    "/{project_id}",
    response_model=ProjectWithRelationsResponse,
    responses={**ERROR_RESPONSES, **NOT_FOUND}
)
def update_project(
    project_id: UUID,
    payload: ProjectUpdate,
    service: ProjectService = Depends(get_project_service)
):
    """Mise à jour partielle d'un projet"""
    updated = service.update_project(str(project_id), payload.changes())
    return ProjectWithRelationsResponse.from_read_model(updated)


@projects_router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**ERROR_RESPONSES, **NOT_FOUND}
)
def delete_project(project_id: UUID, service: ProjectService = Depends(get_project_service)):
    """Supprime un projet et ses associations"""
    service.delete_project(str(project_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# ============================================================================
# TECHNOLOGIES
# ============================================================================

@technologies_router.get("", response_model=List[TechnologyResponse], responses=ERROR_RESPONSES)
def list_technologies(service: TechnologyService = Depends(get_technology_service)):
    """Liste toutes les technologies par nom"""
    return [TechnologyResponse.from_domain(t) for t in service.list_technologies()]


@technologies_router.post(
    "",
    response_model=TechnologyResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**ERROR_RESPONSES, **CONFLICT}
)
def create_technology(payload: TechnologyCreate, service: TechnologyService = Depends(get_technology_service)):
    """Crée une technologie (nom unique)"""
    return TechnologyResponse.from_domain(
        service.create_technology(payload.name, payload.description)
    )

# ============================================================================
# UTILISATEURS
# ============================================================================

@users_router.get("", response_model=List[UserResponse], responses=ERROR_RESPONSES)
def list_users(service: UserService = Depends(get_user_service)):
    """Liste tous les utilisateurs par nom"""
    return [UserResponse.from_domain(u) for u in service.list_users()]


@users_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**ERROR_RESPONSES, **CONFLICT}
)
def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    """Crée un utilisateur (email unique)"""
    return UserResponse.from_domain(service.create_user(payload.name, str(payload.email)))
