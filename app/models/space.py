from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ManagerContact(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }


class SupervisorContact(BaseModel):
    name: str
    email: str
    department: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "department": self.department,
        }


class DocumentFile(BaseModel):
    id: str
    name: str
    uri: str
    type: str = Field(..., description="MIME type reported by the picker")
    size: int = Field(0, description="Size in bytes")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "uri": self.uri,
            "type": self.type,
            "size": self.size,
        }


class Link(BaseModel):
    id: str
    title: str
    url: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "description": self.description,
        }


class Space(BaseModel):
    """
    A physical room or lab managed by the registry.

    A space lives in exactly one of the store's two collections:
    active (is_deleted False) or deleted (is_deleted True).
    """

    id: str
    name: str
    number: str = Field(..., description="Room number, e.g. 'CL-101'")
    description: Optional[str] = None
    photos: List[str] = Field(default_factory=list)

    manager: ManagerContact
    academic_supervisor: SupervisorContact

    access_requirements: str = ""
    emergency_procedures: str = ""

    documentation: List[DocumentFile] = Field(default_factory=list)
    links: List[Link] = Field(default_factory=list)

    qr_code: str = Field(..., description="Serialized QR payload for this space")

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    is_deleted: bool = False

    def __repr__(self) -> str:
        return f"<Space(id={self.id}, name={self.name}, number={self.number})>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "number": self.number,
            "description": self.description,
            "photos": list(self.photos),
            "manager": self.manager.to_dict(),
            "academicSupervisor": self.academic_supervisor.to_dict(),
            "accessRequirements": self.access_requirements,
            "emergencyProcedures": self.emergency_procedures,
            "documentation": [doc.to_dict() for doc in self.documentation],
            "links": [link.to_dict() for link in self.links],
            "qrCode": self.qr_code,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            "isDeleted": self.is_deleted,
        }

    def to_public_dict(self) -> dict:
        """
        Details shown to end users after a scan.
        Leaves out the admin-only lifecycle fields.
        """
        data = self.to_dict()
        for key in ("qrCode", "createdAt", "isDeleted"):
            data.pop(key)
        return data


_NULLABLE_CHANGES = {"description"}


class SpaceChanges(BaseModel):
    """
    Field-level update for a Space.

    Only fields explicitly set are applied. id, qr_code, created_at
    and is_deleted have no counterpart here and cannot be changed.
    """

    name: Optional[str] = None
    number: Optional[str] = None
    description: Optional[str] = None
    photos: Optional[List[str]] = None
    manager: Optional[ManagerContact] = None
    academic_supervisor: Optional[SupervisorContact] = None
    access_requirements: Optional[str] = None
    emergency_procedures: Optional[str] = None
    documentation: Optional[List[DocumentFile]] = None
    links: Optional[List[Link]] = None

    def applied_fields(self) -> dict:
        # Only description may be cleared; None elsewhere means "leave as is"
        return {
            key: getattr(self, key)
            for key in self.model_fields_set
            if getattr(self, key) is not None or key in _NULLABLE_CHANGES
        }
