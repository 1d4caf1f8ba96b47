"""
Services applicatifs
"""

from application.services.user_service import UserService
from application.services.project_service import ProjectService
from application.services.technology_service import TechnologyService

__all__ = [
    "UserService",
    "ProjectService",
    "TechnologyService"
]
