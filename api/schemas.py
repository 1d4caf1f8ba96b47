"""
projects-api/api/schemas.py
Schémas Pydantic pour la validation et la sérialisation
"""

from typing import Optional, List
from uuid import UUID
from pydantic import AnyUrl, BaseModel, EmailStr, Field, TypeAdapter, field_serializer, field_validator
from pydantic import ValidationError as PydanticValidationError
from datetime import datetime

from domain.entities import (
    Page, Project, ProjectWithRelations, Technology, User, UserWithRole
)

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: Optional[str]) -> Optional[str]:
    """Valide l'URL mais conserve la chaîne telle que saisie"""
    if value is None:
        return value
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Repository URL must be a valid URL")
    return value


def _iso(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.isoformat()

# ============================================================================
# PROJETS
# ============================================================================

class ProjectCreate(BaseModel):
    """Schéma pour créer un projet"""
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=2000)
    repository_url: str = Field(..., description="URL du dépôt de code")
    language: str = Field(..., min_length=1, max_length=100)
    rating: Optional[float] = Field(default=None, ge=0.0, le=5.0)
    technology_ids: Optional[List[UUID]] = None
    user_ids: Optional[List[UUID]] = Field(
        default=None,
        description="Le premier utilisateur devient owner, les suivants contributor"
    )

    @field_validator("repository_url")
    @classmethod
    def validate_repository_url(cls, value):
        return _check_url(value)


class ProjectUpdate(BaseModel):
    """
    Schéma pour mettre à jour un projet (tous les champs optionnels).

    Un champ absent n'est pas modifié. `rating: null` efface la note ;
    une liste d'ids présente, même vide, remplace les associations.
    """
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1, max_length=2000)
    repository_url: Optional[str] = None
    language: Optional[str] = Field(default=None, min_length=1, max_length=100)
    rating: Optional[float] = Field(default=None, ge=0.0, le=5.0)
    technology_ids: Optional[List[UUID]] = None
    user_ids: Optional[List[UUID]] = None

    @field_validator("repository_url")
    @classmethod
    def validate_repository_url(cls, value):
        return _check_url(value)

    def changes(self) -> dict:
        """Uniquement les champs envoyés par le client"""
        return self.model_dump(exclude_unset=True)


class ProjectResponse(BaseModel):
    """Schéma pour retourner un projet"""
    id: str
    name: str
    description: str
    repository_url: str
    language: str
    rating: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_serializer('created_at', 'updated_at')
    def serialize_timestamps(self, dt: Optional[datetime], _info):
        return _iso(dt)

    class Config:
        from_attributes = True

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponse":
        return cls.model_validate(project)

# ============================================================================
# TECHNOLOGIES
# ============================================================================

class TechnologyCreate(BaseModel):
    """Schéma pour créer une technologie"""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)


class TechnologyResponse(BaseModel):
    """Schéma pour retourner une technologie"""
    id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_serializer('created_at')
    def serialize_created_at(self, dt: Optional[datetime], _info):
        return _iso(dt)

    class Config:
        from_attributes = True

    @classmethod
    def from_domain(cls, technology: Technology) -> "TechnologyResponse":
        return cls.model_validate(technology)

# ============================================================================
# UTILISATEURS
# ============================================================================

class UserCreate(BaseModel):
    """Schéma pour créer un utilisateur"""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    created_at: Optional[datetime] = None

    @field_serializer('created_at')
    def serialize_created_at(self, dt: Optional[datetime], _info):
        return _iso(dt)

    class Config:
        from_attributes = True

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls.model_validate(user)


class UserWithRoleResponse(UserResponse):
    """Utilisateur dans le contexte d'un projet"""
    role: str

    @classmethod
    def from_member(cls, member: UserWithRole) -> "UserWithRoleResponse":
        return cls(
            id=member.user.id,
            name=member.user.name,
            email=member.user.email,
            created_at=member.user.created_at,
            role=member.role.value
        )

# ============================================================================
# PROJET AVEC RELATIONS / PAGINATION
# ============================================================================

class ProjectWithRelationsResponse(ProjectResponse):
    """Projet avec ses technologies et ses utilisateurs, triés par nom"""
    technologies: List[TechnologyResponse] = Field(default_factory=list)
    users: List[UserWithRoleResponse] = Field(default_factory=list)

    @classmethod
    def from_read_model(cls, item: ProjectWithRelations) -> "ProjectWithRelationsResponse":
        project = item.project
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            repository_url=project.repository_url,
            language=project.language,
            rating=project.rating,
            created_at=project.created_at,
            updated_at=project.updated_at,
            technologies=[TechnologyResponse.from_domain(t) for t in item.technologies],
            users=[UserWithRoleResponse.from_member(u) for u in item.users]
        )


class PaginationResponse(BaseModel):
    page: int
    page_size: int
    total_items: int
    total_pages: int


class PaginatedProjectsResponse(BaseModel):
    """Enveloppe de la liste paginée des projets"""
    data: List[ProjectResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: Page) -> "PaginatedProjectsResponse":
        return cls(
            data=[ProjectResponse.from_domain(p) for p in page.data],
            pagination=PaginationResponse(
                page=page.pagination.page,
                page_size=page.pagination.page_size,
                total_items=page.pagination.total_items,
                total_pages=page.pagination.total_pages
            )
        )

# ============================================================================
# DIVERS
# ============================================================================

class ErrorResponse(BaseModel):
    """Corps de toutes les réponses d'erreur"""
    error: str


class HealthResponse(BaseModel):
    status: str
