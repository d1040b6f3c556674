# /tests/conftest.py

import io
import pytest
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from social_muse.db.database import init_db
from social_muse.models.campaign_model import (
    DesignBrief, GeneratedResult, GenerationRequest, Length, Platform, Tone
)
from social_muse.services import draft_service
from social_muse.services.history_service import HistoryStore

# --- Storage Fixtures ---

@pytest.fixture
def session_factory(tmp_path):
    """
    A sessionmaker bound to a fresh SQLite file in the test's temporary
    directory, with the storage table already created.
    """
    engine = create_engine(
        f"sqlite:///{tmp_path / 'social_muse_test.db'}",
        connect_args={"check_same_thread": False},
    )
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()

@pytest.fixture
def history_store(session_factory):
    return HistoryStore(session_factory, storage_key="testHistory")

@pytest.fixture
def draft():
    return draft_service.new_draft()

# --- Test Data Fixtures ---

@pytest.fixture
def png_bytes():
    """A tiny but genuine PNG file."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), "blue").save(buffer, format="PNG")
    return buffer.getvalue()

@pytest.fixture
def make_result():
    """Factory for history records with sensible defaults."""
    def _make(result_id="res_1", title="Winter Sale", content="Big prizes are here. Ready to play?",
              image_url=None, tones=(Tone.FUN,), timestamp=1735689600000):
        return GeneratedResult(
            id=result_id,
            content=content,
            design_brief=DesignBrief(
                description="Holiday push",
                look_and_feel="A blue cube beside a gift box",
                messaging_hierarchy="1. Gift 2. Cube 3. Logo",
            ),
            image_url=image_url,
            request=GenerationRequest(
                campaign_title=title,
                visual_concept="Gift box on a stage",
                copy_topic="Holiday rewards",
                platform=Platform.INSTAGRAM,
                length=Length.TWO,
                tone=list(tones),
            ),
            timestamp=timestamp,
        )
    return _make
