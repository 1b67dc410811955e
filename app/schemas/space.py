from pydantic import BaseModel, EmailStr, Field, validator
from typing import Optional, List
from app.utils.qr_generator import QR_MAX_PAYLOAD_LENGTH


def _require_text(v):
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError('Field cannot be blank')
    return v


class ManagerInfo(BaseModel):
    name: str = Field(..., max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=40)

    @validator('name')
    def name_not_blank(cls, v):
        return _require_text(v)

    @validator('phone')
    def blank_phone_is_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v


class SupervisorInfo(BaseModel):
    name: str = Field(..., max_length=200)
    email: EmailStr
    department: str = Field(..., max_length=200)

    @validator('name', 'department')
    def text_not_blank(cls, v):
        return _require_text(v)


class DocumentIn(BaseModel):
    id: Optional[str] = Field(None, description="Kept when editing an existing document")
    name: str = Field(..., min_length=1, max_length=255)
    uri: str = Field(..., min_length=1)
    type: str = Field("application/octet-stream", max_length=255)
    size: int = Field(0, ge=0, description="Size in bytes")


class LinkIn(BaseModel):
    id: Optional[str] = Field(None, description="Kept when editing an existing link")
    title: str = Field(..., max_length=200)
    url: str = Field(..., max_length=2000)
    description: Optional[str] = None

    @validator('title', 'url')
    def text_not_blank(cls, v):
        return _require_text(v)


class PhotoIn(BaseModel):
    uri: str = Field(..., min_length=1)


class SpaceCreate(BaseModel):
    name: str = Field(..., max_length=200)
    number: str = Field(..., max_length=50)
    description: Optional[str] = None
    photos: List[str] = Field(default_factory=list)
    manager: ManagerInfo
    academicSupervisor: SupervisorInfo
    accessRequirements: str
    emergencyProcedures: str
    documentation: List[DocumentIn] = Field(default_factory=list)
    links: List[LinkIn] = Field(default_factory=list)

    @validator('name', 'number', 'accessRequirements', 'emergencyProcedures')
    def required_text_not_blank(cls, v):
        return _require_text(v)


class SpaceUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=200)
    number: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    photos: Optional[List[str]] = None
    manager: Optional[ManagerInfo] = None
    academicSupervisor: Optional[SupervisorInfo] = None
    accessRequirements: Optional[str] = None
    emergencyProcedures: Optional[str] = None
    documentation: Optional[List[DocumentIn]] = None
    links: Optional[List[LinkIn]] = None

    @validator('name', 'number', 'accessRequirements', 'emergencyProcedures')
    def required_text_not_blank(cls, v):
        return _require_text(v)


class ManagerResponse(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None


class SupervisorResponse(BaseModel):
    name: str
    email: str
    department: str


class DocumentResponse(BaseModel):
    id: str
    name: str
    uri: str
    type: str
    size: int


class LinkResponse(BaseModel):
    id: str
    title: str
    url: str
    description: Optional[str] = None


class SpaceResponse(BaseModel):
    id: str
    name: str
    number: str
    description: Optional[str] = None
    photos: List[str] = []
    manager: ManagerResponse
    academicSupervisor: SupervisorResponse
    accessRequirements: str
    emergencyProcedures: str
    documentation: List[DocumentResponse] = []
    links: List[LinkResponse] = []
    qrCode: str
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None
    isDeleted: bool

    class Config:
        from_attributes = True


class PublicSpaceResponse(BaseModel):
    id: str
    name: str
    number: str
    description: Optional[str] = None
    photos: List[str] = []
    manager: ManagerResponse
    academicSupervisor: SupervisorResponse
    accessRequirements: str
    emergencyProcedures: str
    documentation: List[DocumentResponse] = []
    links: List[LinkResponse] = []
    updatedAt: Optional[str] = None


class SpaceDetailResponse(BaseModel):
    success: bool = True
    space: SpaceResponse


class SpacesResponse(BaseModel):
    success: bool = True
    spaces: List[SpaceResponse]
    total: int


class PublicSpaceDetailResponse(BaseModel):
    success: bool = True
    space: PublicSpaceResponse


class ScanRequest(BaseModel):
    data: str = Field(..., max_length=QR_MAX_PAYLOAD_LENGTH, description="Raw text decoded from the QR code")


class QRCodeResponse(BaseModel):
    success: bool = True
    spaceId: str
    payload: str
    image: str = Field(..., description="PNG data URI")


class ContactResponse(BaseModel):
    success: bool = True
    name: str
    email: str
    emailUri: str
    phone: Optional[str] = None
    phoneUri: Optional[str] = None
