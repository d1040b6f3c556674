# /social_muse/services/generation_service.py

import time
import uuid
import asyncio
import logging
from typing import Optional, Tuple

from . import creative_service, draft_service
from .history_service import HistoryStore
from ..core.exceptions import (
    GenerationInProgressError,
    ImageGenerationError,
    MissingInputError,
    RefinementTargetNotFoundError,
)
from ..models.campaign_model import GeneratedResult, GenerationRequest, GenerationResponse, ImageStatus
from ..models.draft_model import CampaignDraft

logger = logging.getLogger(__name__)

DEFAULT_CAMPAIGN_TITLE = "New Campaign"
IMAGE_REFINEMENT_KEYWORDS = ("image", "look")

# Held for the whole of one generation; a second submission is rejected, not queued.
_generation_lock = asyncio.Lock()


# --- Helper Functions ---

def _new_result_id() -> str:
    return uuid.uuid4().hex[:9]


def _validate_draft(draft: CampaignDraft) -> None:
    if not draft.copy_topic.strip() and not draft.visual_concept.strip() and not draft.refining_result_id:
        raise MissingInputError("Missing content or concept.")
    if not draft.tones:
        raise MissingInputError("Select at least one tone.")


def should_regenerate_image(refining: Optional[GeneratedResult], refinement_text: str) -> bool:
    """
    A fresh campaign always gets a new image. A tweak only re-renders when
    the instruction talks about the image or its look.
    """
    if refining is None:
        return True
    instruction = refinement_text.lower()
    return any(keyword in instruction for keyword in IMAGE_REFINEMENT_KEYWORDS)


def build_request(draft: CampaignDraft) -> GenerationRequest:
    return GenerationRequest(
        campaign_title=draft.campaign_title.strip() or DEFAULT_CAMPAIGN_TITLE,
        visual_concept=draft.visual_concept,
        copy_topic=draft.copy_topic,
        platform=draft.platform,
        length=draft.length,
        tone=list(draft.tones),
    )


async def _render_image(draft: CampaignDraft) -> Tuple[Optional[str], ImageStatus, Optional[str]]:
    """Runs the image call and folds its outcome into (image_url, status, error)."""
    try:
        image_url = await creative_service.generate_social_image(
            draft.visual_concept,
            draft.platform,
            list(draft.tones),
            draft.reference_image,
        )
    except ImageGenerationError as e:
        logger.warning("Image generation failed; committing campaign without an image. Error: %s", e)
        return None, ImageStatus.FAILED, str(e)

    if image_url is None:
        return None, ImageStatus.EMPTY, None
    return image_url, ImageStatus.GENERATED, None


async def _carry_over_image(refining: Optional[GeneratedResult]) -> Tuple[Optional[str], ImageStatus, Optional[str]]:
    if refining and refining.image_url:
        return refining.image_url, ImageStatus.REUSED, None
    return None, ImageStatus.SKIPPED, None


# --- Main Orchestration Function ---

async def generate_campaign(draft: CampaignDraft, history: HistoryStore) -> GenerationResponse:
    """
    Fires the copy and image calls concurrently, waits for both and commits
    the merged result to the front of history.

    Copy failure aborts the whole operation and nothing is stored. Image
    failure is non-fatal: the campaign is stored without an image and the
    response says so through `image_status`.
    """
    _validate_draft(draft)

    refining = None
    if draft.refining_result_id:
        refining = history.get(draft.refining_result_id)
        if refining is None:
            raise RefinementTargetNotFoundError(
                f"Campaign with ID {draft.refining_result_id} is no longer in history."
            )

    if _generation_lock.locked():
        raise GenerationInProgressError("A campaign is already being generated.")

    async with _generation_lock:
        refining_id = draft.refining_result_id
        request = build_request(draft)
        refinement = draft.refinement_text.strip() if refining else ""

        copy_task = creative_service.generate_copywriting(
            request.copy_topic,
            request.visual_concept,
            request.platform,
            request.length,
            request.tone,
            refinement or None,
            refining.content if refining else None,
        )

        wants_image = (
            draft.include_image
            and draft.visual_concept.strip()
            and should_regenerate_image(refining, refinement)
        )
        image_task = _render_image(draft) if wants_image else _carry_over_image(refining)

        copy_result, (image_url, image_status, image_error) = await asyncio.gather(copy_task, image_task)

        result = GeneratedResult(
            id=_new_result_id(),
            content=copy_result.social_copy,
            design_brief=copy_result.design_brief,
            image_url=image_url,
            request=request,
            timestamp=int(time.time() * 1000),
        )
        history.add(result)
        # The draft is shared; a tweak started while the calls ran must survive.
        if draft.refining_result_id == refining_id:
            draft_service.clear_refinement(draft)

    logger.info(
        "Generated campaign %s ('%s', image: %s).",
        result.id, request.campaign_title, image_status.value
    )
    return GenerationResponse(result=result, image_status=image_status, image_error=image_error)
