"""
Entité Project - Modèle métier pour les projets
"""

from datetime import datetime, timezone
from typing import List, Optional
from dataclasses import dataclass, field

from domain.entities.technology import Technology
from domain.entities.user import UserWithRole


@dataclass
class Project:
    """Entité Project du domaine"""
    id: str
    name: str
    description: str
    repository_url: str
    language: str
    rating: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.name:
            raise ValueError("Project name cannot be empty")
        if self.rating is not None and not 0.0 <= self.rating <= 5.0:
            raise ValueError("Project rating must be between 0.0 and 5.0")
        now = datetime.now(timezone.utc)
        if self.created_at is None:
            self.created_at = now
        if self.updated_at is None:
            self.updated_at = self.created_at

    def apply_changes(self, changes: dict) -> None:
        """
        Applique une mise à jour partielle.

        Seules les clés présentes dans `changes` sont appliquées. `rating`
        peut valoir None pour effacer la note ; pour les autres champs une
        valeur None est ignorée.
        """
        for attr in ("name", "description", "repository_url", "language"):
            value = changes.get(attr)
            if value is not None:
                setattr(self, attr, value)
        if "rating" in changes:
            self.rating = changes["rating"]
        self.touch()

    def touch(self) -> None:
        """Met à jour updated_at (jamais en arrière)"""
        now = datetime.now(timezone.utc)
        previous = self.updated_at
        if previous is not None and previous.tzinfo is None:
            previous = previous.replace(tzinfo=timezone.utc)
        self.updated_at = max(now, previous) if previous else now


@dataclass
class ProjectWithRelations:
    """Vue de lecture : un projet avec ses technologies et ses utilisateurs"""
    project: Project
    technologies: List[Technology] = field(default_factory=list)
    users: List[UserWithRole] = field(default_factory=list)
