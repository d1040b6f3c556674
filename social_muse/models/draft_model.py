# /social_muse/models/draft_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

from .campaign_model import Platform, Length, Tone

class ReferenceImage(BaseModel):
    """
    A user-supplied composition reference. Held only while composing a
    request; never written to history.
    """
    data: str = Field(..., description="Base64-encoded image bytes.")
    mime_type: str

    @property
    def preview(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

class CampaignDraft(BaseModel):
    """The form being composed. Mutable; one per running process."""
    model_config = ConfigDict(validate_assignment=True)

    campaign_title: str = ""
    platform: Platform = Platform.FACEBOOK
    length: Length = Length.THREE
    tones: List[Tone] = Field(default_factory=lambda: [Tone.FUN])
    visual_concept: str = ""
    copy_topic: str = ""
    include_image: bool = True
    reference_image: Optional[ReferenceImage] = None
    refining_result_id: Optional[str] = None
    refinement_text: str = ""

class DraftUpdate(BaseModel):
    """Partial update for the draft. Omitted fields are left untouched."""
    model_config = ConfigDict(extra="forbid")

    campaign_title: Optional[str] = None
    platform: Optional[Platform] = None
    length: Optional[Length] = None
    tones: Optional[List[Tone]] = None
    visual_concept: Optional[str] = None
    copy_topic: Optional[str] = None
    include_image: Optional[bool] = None
    refinement_text: Optional[str] = None

class ReferenceImagePreview(BaseModel):
    mime_type: str
    preview: str

class DraftView(BaseModel):
    """What the client sees of the draft. Raw reference bytes are not echoed."""
    campaign_title: str
    platform: Platform
    length: Length
    tones: List[Tone]
    visual_concept: str
    copy_topic: str
    include_image: bool
    reference_image: Optional[ReferenceImagePreview] = None
    refining_result_id: Optional[str] = None
    refinement_text: str
