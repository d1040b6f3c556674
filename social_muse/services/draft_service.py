# /social_muse/services/draft_service.py

import io
import base64
import logging
from typing import Optional

from fastapi import Request
from PIL import Image, UnidentifiedImageError

from ..core.exceptions import InvalidReferenceImageError
from ..models.campaign_model import GeneratedResult, Tone
from ..models.draft_model import CampaignDraft, DraftUpdate, DraftView, ReferenceImage, ReferenceImagePreview

logger = logging.getLogger(__name__)


def new_draft() -> CampaignDraft:
    return CampaignDraft()


def to_view(draft: CampaignDraft) -> DraftView:
    reference = None
    if draft.reference_image:
        reference = ReferenceImagePreview(
            mime_type=draft.reference_image.mime_type,
            preview=draft.reference_image.preview,
        )
    return DraftView(
        **draft.model_dump(exclude={"reference_image"}),
        reference_image=reference,
    )


def update_draft(draft: CampaignDraft, patch: DraftUpdate) -> CampaignDraft:
    for field, value in patch.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        setattr(draft, field, value)
    return draft


def toggle_tone(draft: CampaignDraft, tone: Tone) -> CampaignDraft:
    """
    Multi-select toggle. The list may end up empty here; generation is
    where an empty tone set is rejected.
    """
    if tone in draft.tones:
        draft.tones = [t for t in draft.tones if t != tone]
    else:
        draft.tones = [*draft.tones, tone]
    return draft


def attach_reference_image(draft: CampaignDraft, file_bytes: bytes, content_type: Optional[str]) -> CampaignDraft:
    """
    Validates the upload with Pillow and stores it base64-encoded. Attaching a
    reference implies the user wants a visual, so include_image is switched on.
    """
    if not file_bytes:
        raise InvalidReferenceImageError("The uploaded file is empty.")
    try:
        with Image.open(io.BytesIO(file_bytes)) as image:
            detected_format = image.format
            image.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
        raise InvalidReferenceImageError(f"The uploaded file is not a readable image. Error: {e}")

    mime_type = content_type if content_type and content_type.startswith("image/") else None
    if not mime_type:
        mime_type = Image.MIME.get(detected_format or "", "image/png")

    draft.reference_image = ReferenceImage(
        data=base64.b64encode(file_bytes).decode("ascii"),
        mime_type=mime_type,
    )
    draft.include_image = True
    logger.info("Attached %s reference image (%d bytes).", mime_type, len(file_bytes))
    return draft


def remove_reference_image(draft: CampaignDraft) -> CampaignDraft:
    draft.reference_image = None
    return draft


def start_tweak(draft: CampaignDraft, result: GeneratedResult) -> CampaignDraft:
    """
    Seeds the form from a past campaign so it can be regenerated with a
    refinement instruction. History is not touched until that generation
    completes.
    """
    request = result.request
    draft.campaign_title = request.campaign_title
    draft.platform = request.platform
    draft.length = request.length
    draft.tones = list(request.tone)
    draft.visual_concept = request.visual_concept
    draft.copy_topic = request.copy_topic
    draft.include_image = bool(result.image_url)
    draft.refining_result_id = result.id
    draft.refinement_text = ""
    return draft


def cancel_tweak(draft: CampaignDraft) -> CampaignDraft:
    draft.refining_result_id = None
    return draft


def clear_refinement(draft: CampaignDraft) -> CampaignDraft:
    draft.refining_result_id = None
    draft.refinement_text = ""
    return draft


# --- DEPENDENCY PROVIDER ---
def get_draft(request: Request) -> CampaignDraft:
    """FastAPI dependency returning the process-wide draft."""
    return request.app.state.draft
