from fastapi import Depends
from app.core.store import SpaceStore, get_store
from app.models.user import User
from app.services.auth_service import AuthService


def get_current_user(store: SpaceStore = Depends(get_store)) -> User:
    return AuthService(store).require_user()


def require_admin(store: SpaceStore = Depends(get_store)) -> User:
    return AuthService(store).require_admin()
