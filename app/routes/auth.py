from fastapi import APIRouter, Depends
from app.core.store import SpaceStore, get_store
from app.models.user import User
from app.schemas.auth import LoginRequest, SessionResponse, MessageResponse
from app.services.auth_service import AuthService
from app.utils.dependencies import get_current_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=SessionResponse)
def login(payload: LoginRequest, store: SpaceStore = Depends(get_store)):
    """Mock login: installs the preset admin or student account as the session user."""
    user = AuthService(store).login(payload.role)
    return {"success": True, "user": user.to_dict()}


@router.post("/logout", response_model=MessageResponse)
def logout(store: SpaceStore = Depends(get_store)):
    AuthService(store).logout()
    return {"success": True, "message": "Logged out successfully"}


@router.get("/me", response_model=SessionResponse)
def me(current_user: User = Depends(get_current_user)):
    return {"success": True, "user": current_user.to_dict()}
