from pydantic import BaseModel
from app.models.user import UserRole


class LoginRequest(BaseModel):
    role: UserRole = UserRole.USER


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    role: str
    universityId: str

    class Config:
        from_attributes = True


class SessionResponse(BaseModel):
    success: bool = True
    user: UserResponse


class MessageResponse(BaseModel):
    success: bool = True
    message: str
