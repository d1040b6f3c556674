# /social_muse/services/database_helpers/storage_repository_sql.py

from typing import Optional
from sqlalchemy.orm import Session
from social_muse.db.models.storage_models import StorageSlot

class StorageRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_slot(self, key: str) -> Optional[StorageSlot]:
        return self.db.query(StorageSlot).filter(StorageSlot.key == key).first()

    def upsert_slot(self, key: str, value: str) -> StorageSlot:
        """Overwrites the slot's value, creating the slot on first write."""
        slot = self.get_slot(key)
        if slot:
            slot.value = value
        else:
            slot = StorageSlot(key=key, value=value)
            self.db.add(slot)
        self.db.commit()
        self.db.refresh(slot)
        return slot

    def delete_slot(self, key: str) -> bool:
        slot = self.get_slot(key)
        if slot:
            self.db.delete(slot)
            self.db.commit()
            return True
        return False
