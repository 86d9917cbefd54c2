# worldsmith/services/user_service.py
import logging
from sqlalchemy.orm import Session
from typing import Optional

from worldsmith.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Service for handling user operations"""

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, username: str, password: str) -> Optional[User]:
        """
        Register a new user.

        Returns:
            The created user or None if the username is already taken.
        """
        if self.get_user_by_username(username):
            return None

        user = User(username=username)
        user.set_password(password)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Registered user {user.username}")
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        """Get a user by ID"""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Get a user by username"""
        return self.db.query(User).filter(User.username == username).first()

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """Return the user when the password matches, None otherwise"""
        user = self.get_user_by_username(username)
        if not user or not user.check_password(password):
            return None
        return user
