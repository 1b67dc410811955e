from typing import Optional, List
from fastapi import HTTPException, status
import logging

from app.core.store import SpaceStore
from app.models.space import (
    Space,
    SpaceChanges,
    ManagerContact,
    SupervisorContact,
    DocumentFile,
    Link,
)
from app.schemas.space import SpaceCreate, SpaceUpdate, DocumentIn, LinkIn
from app.utils.qr_generator import (
    generate_space_id,
    generate_item_id,
    build_qr_payload,
    parse_qr_payload,
    render_space_qr,
    InvalidQRCodeError,
)

logger = logging.getLogger(__name__)

# SpaceUpdate field -> Space attribute
_UPDATE_FIELDS = {
    "name": "name",
    "number": "number",
    "description": "description",
    "photos": "photos",
    "manager": "manager",
    "academicSupervisor": "academic_supervisor",
    "accessRequirements": "access_requirements",
    "emergencyProcedures": "emergency_procedures",
    "documentation": "documentation",
    "links": "links",
}

# Fields an update may explicitly clear
_NULLABLE_FIELDS = {"description"}


def _to_document(doc: DocumentIn) -> DocumentFile:
    return DocumentFile(
        id=doc.id or generate_item_id(),
        name=doc.name,
        uri=doc.uri,
        type=doc.type,
        size=doc.size,
    )


def _to_link(link: LinkIn) -> Link:
    return Link(
        id=link.id or generate_item_id(),
        title=link.title,
        url=link.url,
        description=link.description,
    )


class SpaceService:

    def __init__(self, store: SpaceStore):
        self.store = store

    def _not_found(self, detail: str = "Space not found") -> HTTPException:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

    def _apply(self, space_id: str, changes: SpaceChanges) -> Space:
        if not self.store.update_space(space_id, changes):
            raise self._not_found()
        return self.store.get_space_by_id(space_id)

    # Admin operations

    def list_spaces(self) -> List[Space]:
        return self.store.get_spaces()

    def list_deleted_spaces(self) -> List[Space]:
        return self.store.get_deleted_spaces()

    def get_space(self, space_id: str) -> Space:
        """Active or deleted, so a space pending restoration can still be edited."""
        space = self.store.get_space_by_id(space_id)
        if not space:
            raise self._not_found()
        return space

    def create_space(self, data: SpaceCreate) -> Space:
        space_id = generate_space_id()

        space = Space(
            id=space_id,
            name=data.name,
            number=data.number,
            description=data.description,
            photos=list(data.photos),
            manager=ManagerContact(**data.manager.model_dump()),
            academic_supervisor=SupervisorContact(**data.academicSupervisor.model_dump()),
            access_requirements=data.accessRequirements,
            emergency_procedures=data.emergencyProcedures,
            documentation=[_to_document(doc) for doc in data.documentation],
            links=[_to_link(link) for link in data.links],
            qr_code=build_qr_payload(space_id),
        )

        self.store.add_space(space)
        logger.info(f"Created space {space.id} ({space.number})")
        return space

    def update_space(self, space_id: str, data: SpaceUpdate) -> Space:
        updates = {}
        for field in data.model_fields_set:
            value = getattr(data, field)
            if value is None and field not in _NULLABLE_FIELDS:
                continue

            if field == "manager":
                value = ManagerContact(**value.model_dump())
            elif field == "academicSupervisor":
                value = SupervisorContact(**value.model_dump())
            elif field == "documentation":
                value = [_to_document(doc) for doc in value]
            elif field == "links":
                value = [_to_link(link) for link in value]
            elif field == "photos":
                value = list(value)

            updates[_UPDATE_FIELDS[field]] = value

        return self._apply(space_id, SpaceChanges(**updates))

    def delete_space(self, space_id: str) -> None:
        if not self.store.delete_space(space_id):
            raise self._not_found()

    def restore_space(self, space_id: str) -> Space:
        if not self.store.restore_space(space_id):
            raise self._not_found("Space not found in recycle bin")
        return self.store.get_space_by_id(space_id)

    def purge_space(self, space_id: str) -> None:
        if not self.store.permanently_delete_space(space_id):
            raise self._not_found("Space not found in recycle bin")

    def add_link(self, space_id: str, data: LinkIn) -> Space:
        space = self.get_space(space_id)
        links = list(space.links) + [_to_link(data)]
        return self._apply(space_id, SpaceChanges(links=links))

    def remove_link(self, space_id: str, link_id: str) -> Space:
        space = self.get_space(space_id)
        links = [link for link in space.links if link.id != link_id]
        if len(links) == len(space.links):
            raise self._not_found("Link not found")
        return self._apply(space_id, SpaceChanges(links=links))

    def add_document(self, space_id: str, data: DocumentIn) -> Space:
        space = self.get_space(space_id)
        documentation = list(space.documentation) + [_to_document(data)]
        return self._apply(space_id, SpaceChanges(documentation=documentation))

    def remove_document(self, space_id: str, document_id: str) -> Space:
        space = self.get_space(space_id)
        documentation = [doc for doc in space.documentation if doc.id != document_id]
        if len(documentation) == len(space.documentation):
            raise self._not_found("Document not found")
        return self._apply(space_id, SpaceChanges(documentation=documentation))

    def add_photo(self, space_id: str, uri: str) -> Space:
        space = self.get_space(space_id)
        return self._apply(space_id, SpaceChanges(photos=list(space.photos) + [uri]))

    def remove_photo(self, space_id: str, uri: str) -> Space:
        space = self.get_space(space_id)
        if uri not in space.photos:
            raise self._not_found("Photo not found")
        photos = list(space.photos)
        photos.remove(uri)
        return self._apply(space_id, SpaceChanges(photos=photos))

    def get_qr_image(self, space_id: str, image_format: Optional[str] = None) -> str:
        space = self.get_space(space_id)
        try:
            return render_space_qr(space, image_format)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

    # End-user operations

    def get_public_space(self, space_id: str) -> Space:
        space = self.store.get_space_by_id(space_id)
        if not space or space.is_deleted:
            raise self._not_found()
        return space

    def resolve_qr(self, data: str) -> Space:
        try:
            space_id = parse_qr_payload(data)
        except InvalidQRCodeError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

        return self.get_public_space(space_id)

    def get_contact(self, space_id: str) -> dict:
        space = self.get_public_space(space_id)
        manager = space.manager
        phone: Optional[str] = manager.phone

        return {
            "name": manager.name,
            "email": manager.email,
            "emailUri": f"mailto:{manager.email}",
            "phone": phone,
            "phoneUri": f"tel:{phone}" if phone else None,
        }
