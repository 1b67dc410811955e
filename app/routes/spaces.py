from fastapi import APIRouter, Depends
from app.core.store import SpaceStore, get_store
from app.schemas.space import ScanRequest, PublicSpaceDetailResponse, ContactResponse
from app.services.space_service import SpaceService
from app.utils.dependencies import get_current_user

router = APIRouter(
    prefix="/api",
    tags=["spaces"],
    dependencies=[Depends(get_current_user)],
)


@router.post("/scan", response_model=PublicSpaceDetailResponse)
def scan_qr_code(payload: ScanRequest, store: SpaceStore = Depends(get_store)):
    """
    Resolve the text decoded from a space QR code.

    Returns 400 for payloads that are not space codes and 404 when the
    space no longer exists or is in the recycle bin.
    """
    space = SpaceService(store).resolve_qr(payload.data)
    return {"success": True, "space": space.to_public_dict()}


@router.get("/spaces/{space_id}", response_model=PublicSpaceDetailResponse)
def get_public_space(space_id: str, store: SpaceStore = Depends(get_store)):
    space = SpaceService(store).get_public_space(space_id)
    return {"success": True, "space": space.to_public_dict()}


@router.get("/spaces/{space_id}/contact", response_model=ContactResponse)
def get_space_contact(space_id: str, store: SpaceStore = Depends(get_store)):
    contact = SpaceService(store).get_contact(space_id)
    return {"success": True, **contact}
