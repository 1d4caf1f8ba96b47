"""
Interface UserRepository - Définit les opérations d'accès aux données pour User
"""

from abc import ABC, abstractmethod
from typing import ContextManager, List, Optional
from domain.entities.user import User


class UserRepository(ABC):
    """Interface pour le repository des utilisateurs"""

    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        """Portée transactionnelle : commit en sortie, rollback sur erreur"""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Trouve un utilisateur par son email"""
        pass

    @abstractmethod
    def exists(self, user_id: str) -> bool:
        """Vérifie qu'un utilisateur existe"""
        pass

    @abstractmethod
    def find_all(self) -> List[User]:
        """Retourne tous les utilisateurs triés par nom"""
        pass

    @abstractmethod
    def add(self, user: User) -> User:
        """Insère un utilisateur (DuplicateResourceError si l'email existe)"""
        pass
