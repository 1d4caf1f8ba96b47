"""
Entité Technology - Modèle métier pour les technologies
"""

from datetime import datetime, timezone
from typing import Optional
from dataclasses import dataclass


@dataclass
class Technology:
    """Entité Technology du domaine"""
    id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.name:
            raise ValueError("Technology name cannot be empty")
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)
