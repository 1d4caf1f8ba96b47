"""
Entités du domaine
"""

from domain.entities.user import User, UserRole, UserWithRole
from domain.entities.technology import Technology
from domain.entities.project import Project, ProjectWithRelations
from domain.entities.pagination import ListQueryParams, PaginationMetadata, Page

__all__ = [
    "User",
    "UserRole",
    "UserWithRole",
    "Technology",
    "Project",
    "ProjectWithRelations",
    "ListQueryParams",
    "PaginationMetadata",
    "Page"
]
