"""
UserService - Service applicatif pour la gestion des utilisateurs
"""

import uuid
import logging
from typing import List
from domain.entities.user import User
from domain.exceptions import DuplicateResourceError
from domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service pour la gestion des utilisateurs"""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def list_users(self) -> List[User]:
        """Tous les utilisateurs, par nom croissant"""
        users = self.user_repository.find_all()
        logger.info(f"Listed {len(users)} users")
        return users

    def create_user(self, name: str, email: str) -> User:
        """Crée un nouvel utilisateur ; l'email doit être unique"""
        with self.user_repository.transaction():
            # Vérifier si l'email existe déjà
            if self.user_repository.find_by_email(email):
                raise DuplicateResourceError(f"User with email '{email}' already exists")

            user = self.user_repository.add(User(
                id=str(uuid.uuid4()),
                name=name,
                email=email
            ))

        logger.info(f"Created user: {user.id} ({user.email})")
        return user
