# /social_muse/models/history_model.py

from pydantic import BaseModel
from typing import List

from .campaign_model import GeneratedResult

class ResultCard(BaseModel):
    """
    A history record plus the display values the result list renders:
    fallback title, joined tones and the artwork download name.
    """
    result: GeneratedResult
    display_title: str
    tone_display: str
    has_image: bool
    download_filename: str

class HistoryResponse(BaseModel):
    """
    Defines the data contract for the GET /api/history response.
    """
    results: List[ResultCard]
    total: int
