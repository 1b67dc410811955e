from typing import Optional
from fastapi import APIRouter, Depends, status
from app.core.store import SpaceStore, get_store
from app.schemas.auth import MessageResponse
from app.schemas.space import (
    SpaceCreate,
    SpaceUpdate,
    SpacesResponse,
    SpaceDetailResponse,
    QRCodeResponse,
    LinkIn,
    DocumentIn,
    PhotoIn,
)
from app.services.space_service import SpaceService
from app.utils.dependencies import require_admin

router = APIRouter(
    prefix="/api/admin/spaces",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


def _detail(space) -> dict:
    return {"success": True, "space": space.to_dict()}


@router.get("", response_model=SpacesResponse)
def list_spaces(store: SpaceStore = Depends(get_store)):
    spaces = SpaceService(store).list_spaces()
    return {"success": True, "spaces": [s.to_dict() for s in spaces], "total": len(spaces)}


@router.get("/deleted", response_model=SpacesResponse)
def list_deleted_spaces(store: SpaceStore = Depends(get_store)):
    """Spaces in the recycle bin."""
    spaces = SpaceService(store).list_deleted_spaces()
    return {"success": True, "spaces": [s.to_dict() for s in spaces], "total": len(spaces)}


@router.post("", response_model=SpaceDetailResponse, status_code=status.HTTP_201_CREATED)
def create_space(payload: SpaceCreate, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).create_space(payload))


@router.get("/{space_id}", response_model=SpaceDetailResponse)
def get_space(space_id: str, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).get_space(space_id))


@router.put("/{space_id}", response_model=SpaceDetailResponse)
def update_space(space_id: str, payload: SpaceUpdate, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).update_space(space_id, payload))


@router.delete("/{space_id}", response_model=MessageResponse)
def delete_space(space_id: str, store: SpaceStore = Depends(get_store)):
    """Soft delete: the space moves to the recycle bin."""
    SpaceService(store).delete_space(space_id)
    return {"success": True, "message": "Space moved to recycle bin"}


@router.post("/{space_id}/restore", response_model=SpaceDetailResponse)
def restore_space(space_id: str, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).restore_space(space_id))


@router.delete("/{space_id}/permanent", response_model=MessageResponse)
def purge_space(space_id: str, store: SpaceStore = Depends(get_store)):
    """Irreversible. Only spaces already in the recycle bin can be purged."""
    SpaceService(store).purge_space(space_id)
    return {"success": True, "message": "Space permanently deleted"}


@router.get("/{space_id}/qr", response_model=QRCodeResponse)
def get_space_qr(space_id: str, format: Optional[str] = None, store: SpaceStore = Depends(get_store)):
    """QR image for printing; format is "png" (default) or "svg"."""
    service = SpaceService(store)
    space = service.get_space(space_id)
    return {
        "success": True,
        "spaceId": space.id,
        "payload": space.qr_code,
        "image": service.get_qr_image(space_id, format),
    }


@router.post("/{space_id}/links", response_model=SpaceDetailResponse)
def add_link(space_id: str, payload: LinkIn, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).add_link(space_id, payload))


@router.delete("/{space_id}/links/{link_id}", response_model=SpaceDetailResponse)
def remove_link(space_id: str, link_id: str, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).remove_link(space_id, link_id))


@router.post("/{space_id}/documents", response_model=SpaceDetailResponse)
def add_document(space_id: str, payload: DocumentIn, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).add_document(space_id, payload))


@router.delete("/{space_id}/documents/{document_id}", response_model=SpaceDetailResponse)
def remove_document(space_id: str, document_id: str, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).remove_document(space_id, document_id))


@router.post("/{space_id}/photos", response_model=SpaceDetailResponse)
def add_photo(space_id: str, payload: PhotoIn, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).add_photo(space_id, payload.uri))


@router.delete("/{space_id}/photos", response_model=SpaceDetailResponse)
def remove_photo(space_id: str, uri: str, store: SpaceStore = Depends(get_store)):
    return _detail(SpaceService(store).remove_photo(space_id, uri))
