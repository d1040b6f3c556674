# /tests/test_generation_service.py

import asyncio
import pytest
from unittest.mock import AsyncMock

from social_muse.core.exceptions import (
    CopyGenerationError,
    GenerationInProgressError,
    ImageGenerationError,
    MissingInputError,
    RefinementTargetNotFoundError,
)
from social_muse.models.campaign_model import CopywritingResponse, DesignBrief, ImageStatus, Tone
from social_muse.services import draft_service, generation_service

NEW_IMAGE = "data:image/png;base64,TkVX"
OLD_IMAGE = "data:image/png;base64,T0xE"

@pytest.fixture
def mock_copy(mocker):
    return mocker.patch(
        "social_muse.services.creative_service.generate_copywriting",
        new=AsyncMock(return_value=CopywritingResponse(
            social_copy="Fresh prizes daily. Ready?",
            design_brief=DesignBrief(description="d", look_and_feel="l", messaging_hierarchy="m"),
        )),
    )

@pytest.fixture
def mock_image(mocker):
    return mocker.patch(
        "social_muse.services.creative_service.generate_social_image",
        new=AsyncMock(return_value=NEW_IMAGE),
    )

@pytest.fixture
def filled_draft(draft):
    draft.campaign_title = "Spring Launch"
    draft.copy_topic = "Spring rewards"
    draft.visual_concept = "Blue cube in a flower field"
    return draft


# --- Validation ---

@pytest.mark.asyncio
async def test_blank_topic_and_concept_makes_no_provider_calls(draft, history_store, mock_copy, mock_image):
    draft.copy_topic = "   "
    draft.visual_concept = ""
    with pytest.raises(MissingInputError, match="Missing content or concept."):
        await generation_service.generate_campaign(draft, history_store)

    mock_copy.assert_not_called()
    mock_image.assert_not_called()
    assert history_store.results == []

@pytest.mark.asyncio
async def test_empty_tone_set_is_rejected(filled_draft, history_store, mock_copy):
    filled_draft.tones = []
    with pytest.raises(MissingInputError):
        await generation_service.generate_campaign(filled_draft, history_store)
    mock_copy.assert_not_called()

@pytest.mark.asyncio
async def test_refinement_of_deleted_result_is_rejected(filled_draft, history_store, mock_copy):
    filled_draft.refining_result_id = "gone"
    with pytest.raises(RefinementTargetNotFoundError):
        await generation_service.generate_campaign(filled_draft, history_store)
    mock_copy.assert_not_called()


# --- Fresh Campaigns ---

@pytest.mark.asyncio
async def test_successful_generation_prepends_one_record(filled_draft, history_store, make_result, mock_copy, mock_image):
    history_store.add(make_result("existing"))

    response = await generation_service.generate_campaign(filled_draft, history_store)

    assert [r.id for r in history_store.results] == [response.result.id, "existing"]
    assert response.image_status == ImageStatus.GENERATED
    assert response.result.image_url == NEW_IMAGE
    assert response.result.content == "Fresh prizes daily. Ready?"
    assert response.result.request.campaign_title == "Spring Launch"
    assert len(response.result.id) == 9
    mock_image.assert_awaited_once()

@pytest.mark.asyncio
async def test_blank_title_defaults_to_new_campaign(filled_draft, history_store, mock_copy, mock_image):
    filled_draft.campaign_title = "  "
    response = await generation_service.generate_campaign(filled_draft, history_store)
    assert response.result.request.campaign_title == "New Campaign"

@pytest.mark.asyncio
async def test_image_skipped_when_not_requested(filled_draft, history_store, mock_copy, mock_image):
    filled_draft.include_image = False
    response = await generation_service.generate_campaign(filled_draft, history_store)

    mock_image.assert_not_called()
    assert response.image_status == ImageStatus.SKIPPED
    assert response.result.image_url is None

@pytest.mark.asyncio
async def test_image_skipped_without_visual_concept(filled_draft, history_store, mock_copy, mock_image):
    filled_draft.visual_concept = ""
    response = await generation_service.generate_campaign(filled_draft, history_store)
    mock_image.assert_not_called()
    assert response.image_status == ImageStatus.SKIPPED

@pytest.mark.asyncio
async def test_image_failure_is_reported_but_campaign_is_kept(filled_draft, history_store, mock_copy, mock_image):
    mock_image.side_effect = ImageGenerationError("model overloaded")

    response = await generation_service.generate_campaign(filled_draft, history_store)

    assert response.image_status == ImageStatus.FAILED
    assert "model overloaded" in response.image_error
    assert response.result.image_url is None
    assert len(history_store.results) == 1

@pytest.mark.asyncio
async def test_provider_without_image_is_reported_as_empty(filled_draft, history_store, mock_copy, mock_image):
    mock_image.return_value = None
    response = await generation_service.generate_campaign(filled_draft, history_store)
    assert response.image_status == ImageStatus.EMPTY

@pytest.mark.asyncio
async def test_copy_failure_commits_nothing(filled_draft, history_store, mock_copy, mock_image):
    mock_copy.side_effect = CopyGenerationError("Failed to generate copywriting.")

    with pytest.raises(CopyGenerationError):
        await generation_service.generate_campaign(filled_draft, history_store)

    assert history_store.results == []


# --- Refinement ---

@pytest.mark.asyncio
async def test_tweak_without_image_keywords_reuses_prior_image(draft, history_store, make_result, mock_copy, mock_image):
    original = make_result("orig", image_url=OLD_IMAGE, content="Old copy. Ready?")
    history_store.add(original)
    draft_service.start_tweak(draft, original)
    draft.refinement_text = "Make it shorter"

    response = await generation_service.generate_campaign(draft, history_store)

    mock_image.assert_not_called()
    assert response.image_status == ImageStatus.REUSED
    assert response.result.image_url == OLD_IMAGE
    args = mock_copy.await_args.args
    assert args[5] == "Make it shorter"
    assert args[6] == "Old copy. Ready?"

@pytest.mark.asyncio
@pytest.mark.parametrize("instruction", ["Change the IMAGE to night time", "Give it a warmer look"])
async def test_tweak_mentioning_image_regenerates(draft, history_store, make_result, mock_copy, mock_image, instruction):
    original = make_result("orig", image_url=OLD_IMAGE)
    history_store.add(original)
    draft_service.start_tweak(draft, original)
    draft.refinement_text = instruction

    response = await generation_service.generate_campaign(draft, history_store)

    mock_image.assert_awaited_once()
    assert response.result.image_url == NEW_IMAGE

@pytest.mark.asyncio
async def test_tweak_adds_record_only_after_generation(draft, history_store, make_result, mock_copy, mock_image):
    original = make_result("orig")
    history_store.add(original)

    draft_service.start_tweak(draft, original)
    draft.refinement_text = "Funnier please"
    assert [r.id for r in history_store.results] == ["orig"]

    response = await generation_service.generate_campaign(draft, history_store)

    assert [r.id for r in history_store.results] == [response.result.id, "orig"]
    assert draft.refining_result_id is None
    assert draft.refinement_text == ""

@pytest.mark.asyncio
async def test_tweak_with_blank_inputs_is_allowed(draft, history_store, make_result, mock_copy, mock_image):
    original = make_result("orig")
    history_store.add(original)
    draft_service.start_tweak(draft, original)
    draft.copy_topic = ""
    draft.visual_concept = ""

    response = await generation_service.generate_campaign(draft, history_store)
    assert response.result.id != "orig"


# --- Concurrency ---

@pytest.mark.asyncio
async def test_second_submission_while_running_is_rejected(filled_draft, history_store, mocker):
    release = asyncio.Event()

    async def slow_copy(*args, **kwargs):
        await release.wait()
        return CopywritingResponse(social_copy="Done. Ready?", design_brief=DesignBrief())

    mocker.patch("social_muse.services.creative_service.generate_copywriting", new=slow_copy)
    filled_draft.include_image = False

    first = asyncio.create_task(generation_service.generate_campaign(filled_draft, history_store))
    await asyncio.sleep(0)

    with pytest.raises(GenerationInProgressError):
        await generation_service.generate_campaign(filled_draft, history_store)

    release.set()
    await first
    assert len(history_store.results) == 1

@pytest.mark.asyncio
async def test_tweak_started_during_generation_is_kept(filled_draft, history_store, make_result, mocker):
    release = asyncio.Event()

    async def slow_copy(*args, **kwargs):
        await release.wait()
        return CopywritingResponse(social_copy="Done. Ready?", design_brief=DesignBrief())

    mocker.patch("social_muse.services.creative_service.generate_copywriting", new=slow_copy)
    filled_draft.include_image = False
    earlier = make_result("earlier")
    history_store.add(earlier)

    running = asyncio.create_task(generation_service.generate_campaign(filled_draft, history_store))
    await asyncio.sleep(0)
    draft_service.start_tweak(filled_draft, earlier)
    filled_draft.refinement_text = "Make it shorter"

    release.set()
    await running

    assert filled_draft.refining_result_id == "earlier"
    assert filled_draft.refinement_text == "Make it shorter"


def test_should_regenerate_image():
    assert generation_service.should_regenerate_image(None, "") is True
    assert generation_service.should_regenerate_image(object(), "shorter please") is False
    assert generation_service.should_regenerate_image(object(), "new Look") is True
