"""
Entité User - Modèle métier pour les utilisateurs
"""

from datetime import datetime, timezone
from typing import Optional
from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    """Rôle d'un utilisateur dans un projet"""
    OWNER = "owner"
    CONTRIBUTOR = "contributor"
    VIEWER = "viewer"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["UserRole"]:
        """Retourne le rôle correspondant, ou None si la chaîne est inconnue"""
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def for_position(cls, index: int) -> "UserRole":
        """Le premier utilisateur listé est propriétaire, les suivants contributeurs"""
        return cls.OWNER if index == 0 else cls.CONTRIBUTOR


@dataclass
class User:
    """Entité User du domaine"""
    id: str
    name: str
    email: str
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.name:
            raise ValueError("User name cannot be empty")
        if not self.email:
            raise ValueError("User email cannot be empty")
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)


@dataclass
class UserWithRole:
    """Utilisateur dans le contexte d'un projet"""
    user: User
    role: UserRole
