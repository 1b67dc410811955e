from typing import Optional, List
from fastapi import Request
import logging

from app.models.space import Space, SpaceChanges, utcnow
from app.models.user import User

logger = logging.getLogger(__name__)


class SpaceStore:
    """
    In-memory registry of spaces.

    Records are split between an active list and a deleted list (the
    recycle bin). Both lists keep insertion order. There is no
    persistence: a new store starts empty.
    """

    def __init__(self):
        self._spaces: List[Space] = []
        self._deleted_spaces: List[Space] = []
        self._current_user: Optional[User] = None

    # Session

    def set_current_user(self, user: Optional[User]) -> None:
        self._current_user = user
        if user:
            logger.info(f"Current user set: {user.name} ({user.role.value})")
        else:
            logger.info("Current user cleared")

    def get_current_user(self) -> Optional[User]:
        return self._current_user

    def is_admin(self) -> bool:
        return self._current_user is not None and self._current_user.is_admin

    # Spaces

    def add_space(self, space: Space) -> None:
        # Id uniqueness is the caller's responsibility
        self._spaces.append(space)
        logger.info(f"Space added: {space.id} ({space.name})")

    def update_space(self, space_id: str, changes: SpaceChanges) -> bool:
        space = self.get_space_by_id(space_id)
        if space is None:
            logger.warning(f"Space not found for update: {space_id}")
            return False

        for key, value in changes.applied_fields().items():
            setattr(space, key, value)
        self._touch(space)

        logger.info(f"Space updated: {space_id}")
        return True

    def delete_space(self, space_id: str) -> bool:
        index = self._index(self._spaces, space_id)
        if index is None:
            logger.warning(f"Active space not found for delete: {space_id}")
            return False

        space = self._spaces.pop(index)
        space.is_deleted = True
        self._touch(space)
        self._deleted_spaces.append(space)

        logger.info(f"Space deleted: {space_id}")
        return True

    def restore_space(self, space_id: str) -> bool:
        index = self._index(self._deleted_spaces, space_id)
        if index is None:
            logger.warning(f"Deleted space not found for restore: {space_id}")
            return False

        space = self._deleted_spaces.pop(index)
        space.is_deleted = False
        self._touch(space)
        self._spaces.append(space)

        logger.info(f"Space restored: {space_id}")
        return True

    def permanently_delete_space(self, space_id: str) -> bool:
        # Only records already in the recycle bin can be purged
        index = self._index(self._deleted_spaces, space_id)
        if index is None:
            logger.warning(f"Deleted space not found for purge: {space_id}")
            return False

        del self._deleted_spaces[index]
        logger.info(f"Space permanently deleted: {space_id}")
        return True

    def get_spaces(self) -> List[Space]:
        return list(self._spaces)

    def get_deleted_spaces(self) -> List[Space]:
        return list(self._deleted_spaces)

    def get_space_by_id(self, space_id: str) -> Optional[Space]:
        space = self._find(self._spaces, space_id)
        if space is None:
            space = self._find(self._deleted_spaces, space_id)
        return space

    def clear(self) -> None:
        self._spaces.clear()
        self._deleted_spaces.clear()
        self._current_user = None

    @staticmethod
    def _index(spaces: List[Space], space_id: str) -> Optional[int]:
        return next((i for i, space in enumerate(spaces) if space.id == space_id), None)

    @staticmethod
    def _find(spaces: List[Space], space_id: str) -> Optional[Space]:
        return next((space for space in spaces if space.id == space_id), None)

    @staticmethod
    def _touch(space: Space) -> None:
        # updated_at never moves backwards
        space.updated_at = max(utcnow(), space.updated_at)


def get_store(request: Request) -> SpaceStore:
    """
    Dependency function returning the application's store.

    Usage:
        @router.get("/spaces")
        def list_spaces(store: SpaceStore = Depends(get_store)):
            return store.get_spaces()
    """
    return request.app.state.store


def init_store() -> SpaceStore:
    """
    Create the application store.
    Should be called on application startup.
    """
    from app.core.config import settings
    from app.core.seed import seed_mock_data

    store = SpaceStore()
    if settings.SEED_MOCK_DATA:
        seed_mock_data(store)
    return store


def close_store(store: SpaceStore) -> None:
    """Drop all in-memory state. Called on application shutdown."""
    store.clear()
