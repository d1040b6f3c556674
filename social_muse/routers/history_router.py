# /social_muse/routers/history_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.responses import PlainTextResponse
from typing import Optional

# Import the Pydantic models that define our API contract
from ..models import history_model, draft_model
from ..models.campaign_model import GeneratedResult
from ..models.draft_model import CampaignDraft

# Import the services that contain our business logic
from ..services import history_service, draft_service, presentation_service
from ..services.draft_service import get_draft
from ..services.history_service import HistoryStore, get_history_store
from ..services.presentation_service import ClipboardPart

router = APIRouter()


def _get_result_or_404(store: HistoryStore, generation_id: str) -> GeneratedResult:
    result = store.get(generation_id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Campaign with ID {generation_id} not found.",
        )
    return result


@router.get(
    "",  # Maps to /api/history
    response_model=history_model.HistoryResponse,
    summary="Get Campaign History"
)
def get_campaign_history(
    search: Optional[str] = None,
    store: HistoryStore = Depends(get_history_store)
):
    """
    Endpoint to retrieve past campaigns, newest first, optionally filtered
    by campaign title or copy.
    """
    return history_service.get_history(store=store, search=search)


@router.get(
    "/{generation_id}",
    response_model=history_model.ResultCard,
    summary="Get a Single Campaign"
)
def get_campaign(generation_id: str, store: HistoryStore = Depends(get_history_store)):
    return presentation_service.build_result_card(_get_result_or_404(store, generation_id))


@router.delete(
    "/{generation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a Campaign",
    description="Permanently deletes a single campaign from history.",
    responses={404: {"description": "Campaign not found"}}
)
def delete_campaign(generation_id: str, store: HistoryStore = Depends(get_history_store)):
    if not store.delete(generation_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Campaign with ID {generation_id} not found.",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{generation_id}/tweak",
    response_model=draft_model.DraftView,
    summary="Tweak a Campaign",
    description="Seeds the draft from a past campaign. Nothing is added to history until the next generation."
)
def tweak_campaign(
    generation_id: str,
    store: HistoryStore = Depends(get_history_store),
    draft: CampaignDraft = Depends(get_draft)
):
    result = _get_result_or_404(store, generation_id)
    return draft_service.to_view(draft_service.start_tweak(draft, result))


@router.get(
    "/{generation_id}/image",
    summary="Download Campaign Artwork",
    responses={200: {"content": {"image/png": {}}}, 404: {"description": "Campaign or image not found"}}
)
def download_campaign_image(generation_id: str, store: HistoryStore = Depends(get_history_store)):
    result = _get_result_or_404(store, generation_id)
    try:
        image_bytes = presentation_service.artwork_png(result)
    except (ValueError, OSError) as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Stored image is unreadable: {e}")
    if image_bytes is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Campaign with ID {generation_id} has no image.",
        )
    filename = presentation_service.download_filename(result)
    return Response(
        content=image_bytes,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get(
    "/{generation_id}/clipboard/{part}",
    response_class=PlainTextResponse,
    summary="Get Text for the Clipboard",
    description="Returns the copy or one design brief section as plain text."
)
def get_clipboard_text(
    generation_id: str,
    part: ClipboardPart,
    store: HistoryStore = Depends(get_history_store)
):
    result = _get_result_or_404(store, generation_id)
    text = presentation_service.clipboard_text(result, part)
    if text is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Campaign with ID {generation_id} has no design brief.",
        )
    return PlainTextResponse(text)
