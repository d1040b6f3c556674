# /social_muse/services/storage_service.py

from typing import Optional
from sqlalchemy.orm import Session

from .database_helpers.storage_repository_sql import StorageRepositorySQL


class StorageService:
    """
    Durable key/value storage with the same surface as browser localStorage.
    Values are opaque strings; callers own the serialization format.
    """

    def __init__(self, db_session: Session):
        self.slot_repo = StorageRepositorySQL(db_session)

    def get_item(self, key: str) -> Optional[str]:
        slot = self.slot_repo.get_slot(key)
        return slot.value if slot else None

    def set_item(self, key: str, value: str) -> None:
        self.slot_repo.upsert_slot(key, value)

    def remove_item(self, key: str) -> bool:
        return self.slot_repo.delete_slot(key)
