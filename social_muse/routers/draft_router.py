# /social_muse/routers/draft_router.py

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File

from ..core.exceptions import InvalidReferenceImageError
from ..models import draft_model
from ..models.campaign_model import Tone
from ..models.draft_model import CampaignDraft
from ..services import draft_service
from ..services.draft_service import get_draft

router = APIRouter()


@router.get(
    "",  # Maps to /api/draft
    response_model=draft_model.DraftView,
    summary="Get the Campaign Draft"
)
def read_draft(draft: CampaignDraft = Depends(get_draft)):
    return draft_service.to_view(draft)


@router.patch(
    "",
    response_model=draft_model.DraftView,
    summary="Update the Campaign Draft",
    description="Partially updates the form. Omitted fields keep their current values."
)
def update_draft(
    payload: draft_model.DraftUpdate,
    draft: CampaignDraft = Depends(get_draft)
):
    return draft_service.to_view(draft_service.update_draft(draft, payload))


@router.post(
    "/tones/{tone}/toggle",
    response_model=draft_model.DraftView,
    summary="Toggle a Tone"
)
def toggle_tone(tone: Tone, draft: CampaignDraft = Depends(get_draft)):
    return draft_service.to_view(draft_service.toggle_tone(draft, tone))


@router.post(
    "/reference-image",
    response_model=draft_model.DraftView,
    summary="Attach a Composition Reference",
    description="Uploads an image used only for the composition of the generated artwork."
)
async def attach_reference_image(
    file: UploadFile = File(...),
    draft: CampaignDraft = Depends(get_draft)
):
    file_bytes = await file.read()
    try:
        draft_service.attach_reference_image(draft, file_bytes, file.content_type)
    except InvalidReferenceImageError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return draft_service.to_view(draft)


@router.delete(
    "/reference-image",
    response_model=draft_model.DraftView,
    summary="Remove the Composition Reference"
)
def remove_reference_image(draft: CampaignDraft = Depends(get_draft)):
    return draft_service.to_view(draft_service.remove_reference_image(draft))


@router.delete(
    "/refinement",
    response_model=draft_model.DraftView,
    summary="Stop Refining a Campaign",
    description="Leaves tweak mode. The form keeps the values it was seeded with."
)
def cancel_refinement(draft: CampaignDraft = Depends(get_draft)):
    return draft_service.to_view(draft_service.cancel_tweak(draft))
