# /social_muse/routers/campaigns_router.py

import logging
from fastapi import APIRouter, Depends, HTTPException, status

from ..core.exceptions import (
    CopyGenerationError,
    GenerationInProgressError,
    MissingInputError,
    RefinementTargetNotFoundError,
)
from ..models import campaign_model
from ..models.draft_model import CampaignDraft
from ..services import generation_service
from ..services.draft_service import get_draft
from ..services.history_service import HistoryStore, get_history_store

router = APIRouter()
logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "AI generation failed. Please try again."


@router.get(
    "/options",
    response_model=campaign_model.CampaignOptions,
    summary="List Campaign Options",
    description="The platforms, tones and lengths a campaign can be generated with."
)
def get_campaign_options():
    return campaign_model.CampaignOptions(
        platforms=list(campaign_model.Platform),
        tones=list(campaign_model.Tone),
        lengths=list(campaign_model.Length),
    )


@router.post(
    "/generate",
    response_model=campaign_model.GenerationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a Campaign",
    description="Generates copy and artwork from the current draft and prepends the result to history."
)
async def generate_campaign(
    draft: CampaignDraft = Depends(get_draft),
    history: HistoryStore = Depends(get_history_store)
):
    try:
        return await generation_service.generate_campaign(draft, history)
    except MissingInputError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except RefinementTargetNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except GenerationInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except CopyGenerationError as e:
        # Log the cause server-side; the client only gets the generic message.
        logger.exception("Campaign generation failed: %s", e)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=GENERATION_FAILED_MESSAGE)
    except Exception as e:
        logger.exception("Unexpected error during campaign generation: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An unexpected error occurred.")
