"""
Exceptions du domaine - Taxonomie des erreurs applicatives
"""


class AppError(Exception):
    """Erreur de base de l'application"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    """Ressource introuvable"""
    kind = "Resource"

    def __init__(self, resource_id: str):
        super().__init__(f"{self.kind} not found with id: {resource_id}")
        self.resource_id = resource_id


class ProjectNotFoundError(NotFoundError):
    kind = "Project"


class TechnologyNotFoundError(NotFoundError):
    kind = "Technology"


class UserNotFoundError(NotFoundError):
    kind = "User"


class DuplicateResourceError(AppError):
    """Violation d'unicité (nom de technologie, email utilisateur)"""


class ValidationError(AppError):
    """Charge utile invalide"""


class StoreError(AppError):
    """Échec de la base de données (le détail reste dans les logs)"""


class InternalError(AppError):
    """Invariant violé (ex: identifiant illisible relu depuis la base)"""
