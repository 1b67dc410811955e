from typing import Optional
from fastapi import HTTPException, status
from app.core.store import SpaceStore
from app.core.seed import MOCK_USERS
from app.models.user import User, UserRole


class AuthService:
    """Mock session handling on top of the store's current-user slot."""

    def __init__(self, store: SpaceStore):
        self.store = store

    def login(self, role: UserRole) -> User:
        user = MOCK_USERS[role].model_copy()
        self.store.set_current_user(user)
        return user

    def logout(self) -> None:
        self.store.set_current_user(None)

    def get_current_user(self) -> User:
        user: Optional[User] = self.store.get_current_user()

        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Not logged in. Please log in to continue."
            )

        return user

    def require_user(self) -> User:
        return self.get_current_user()

    def require_admin(self) -> User:
        user = self.get_current_user()

        if not user.is_admin:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin role required"
            )

        return user
