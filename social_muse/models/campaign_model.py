# /social_muse/models/campaign_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from enum import Enum

# --- Enumerations for Campaign Settings ---
class Platform(str, Enum):
    TWITTER = "Twitter/X"
    FACEBOOK = "Facebook"
    INSTAGRAM = "Instagram"
    TIKTOK = "TikTok"
    REDDIT = "Reddit"
    DISCORD = "Discord"

class Length(str, Enum):
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"

class Tone(str, Enum):
    ENTERTAINING = "Entertaining"
    FUN = "Fun"
    WARM = "Warm"
    PLAYFUL = "Playful"
    WITTY = "Witty"
    CASUAL = "Casual"
    URGENT = "Urgent"
    INSPIRATIONAL = "Inspirational"

class ImageStatus(str, Enum):
    GENERATED = "generated"
    REUSED = "reused"
    SKIPPED = "skipped"
    EMPTY = "empty"
    FAILED = "failed"


# --- Models for a Campaign ---
class GenerationRequest(BaseModel):
    """The campaign parameters a result was generated from."""
    model_config = ConfigDict(frozen=True)

    campaign_title: str
    visual_concept: str = ""
    copy_topic: str = ""
    platform: Platform
    length: Length
    tone: List[Tone] = Field(..., min_length=1)

class DesignBrief(BaseModel):
    """Plain-language guidance for the designer who finishes the artwork."""
    model_config = ConfigDict(frozen=True)

    description: str = ""
    look_and_feel: str = ""
    messaging_hierarchy: str = ""

class CopywritingResponse(BaseModel):
    social_copy: str
    design_brief: DesignBrief

class GeneratedResult(BaseModel):
    """
    One campaign in the history. Immutable once created; the history store
    is its only owner. `image_url` is an inline data URL.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    design_brief: Optional[DesignBrief] = None
    image_url: Optional[str] = None
    request: GenerationRequest
    timestamp: int = Field(..., description="Creation time in epoch milliseconds.")


# --- API Contracts ---
class GenerationResponse(BaseModel):
    """
    The outcome of one generation. Image failures do not abort the campaign,
    so they are reported here instead of as an HTTP error.
    """
    result: GeneratedResult
    image_status: ImageStatus
    image_error: Optional[str] = None

class CampaignOptions(BaseModel):
    platforms: List[Platform]
    tones: List[Tone]
    lengths: List[Length]
