# /social_muse/services/history_service.py

import os
import json
import logging
from typing import Callable, List, Optional

from dotenv import load_dotenv
from fastapi import Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from .storage_service import StorageService
from . import presentation_service
from ..models.campaign_model import GeneratedResult
from ..models.history_model import HistoryResponse

load_dotenv()
HISTORY_STORAGE_KEY = os.getenv("HISTORY_STORAGE_KEY", "socialMuseHistory")

logger = logging.getLogger(__name__)


class HistoryStore:
    """
    The list of past campaigns, newest first. Loaded once from a single named
    storage slot and written back in full after every change.
    """

    def __init__(self, session_factory: Callable[[], Session], storage_key: str = HISTORY_STORAGE_KEY):
        self._session_factory = session_factory
        self.storage_key = storage_key
        self._results: List[GeneratedResult] = []

    @property
    def results(self) -> List[GeneratedResult]:
        return list(self._results)

    def load(self) -> int:
        """Replaces the in-memory list with the stored one. Returns the record count."""
        with self._session_factory() as session:
            raw = StorageService(session).get_item(self.storage_key)

        self._results = _deserialize(raw) if raw else []
        logger.info("Loaded %d campaign(s) from storage slot '%s'.", len(self._results), self.storage_key)
        return len(self._results)

    def get(self, result_id: str) -> Optional[GeneratedResult]:
        return next((r for r in self._results if r.id == result_id), None)

    def add(self, result: GeneratedResult) -> GeneratedResult:
        updated = [result, *self._results]
        self._persist(updated)
        self._results = updated
        return result

    def delete(self, result_id: str) -> bool:
        remaining = [r for r in self._results if r.id != result_id]
        if len(remaining) == len(self._results):
            return False
        self._persist(remaining)
        self._results = remaining
        return True

    def _persist(self, results: List[GeneratedResult]) -> None:
        """Writes the given list to storage. Memory is only swapped once this succeeds."""
        payload = json.dumps([r.model_dump(mode="json") for r in results])
        with self._session_factory() as session:
            StorageService(session).set_item(self.storage_key, payload)


def _deserialize(raw: str) -> List[GeneratedResult]:
    try:
        items = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("History slot is not valid JSON, starting empty. Error: %s", e)
        return []
    if not isinstance(items, list):
        logger.warning("History slot does not hold a list, starting empty.")
        return []

    results = []
    for item in items:
        try:
            results.append(GeneratedResult.model_validate(item))
        except ValidationError as e:
            record_id = item.get("id", "N/A") if isinstance(item, dict) else "N/A"
            logger.warning("Skipping corrupted history record: %s. Error: %s", record_id, e)
    return results


# --- PUBLIC SERVICE FUNCTIONS ---

def get_history(store: HistoryStore, search: Optional[str] = None) -> HistoryResponse:
    """
    Returns the history as result cards, filtered by a case-insensitive match
    on campaign title or generated copy.
    """
    records = store.results
    if search:
        search_lower = search.lower()
        records = [
            r for r in records
            if search_lower in r.request.campaign_title.lower() or search_lower in r.content.lower()
        ]

    cards = [presentation_service.build_result_card(r) for r in records]
    return HistoryResponse(results=cards, total=len(cards))


# --- DEPENDENCY PROVIDER ---
def get_history_store(request: Request) -> HistoryStore:
    """FastAPI dependency returning the store created in the application lifespan."""
    return request.app.state.history_store
